"""Process entry point — load configuration and serve the webhook."""

import logging

import uvicorn

from ovh_webhook.config import load_config
from ovh_webhook.server import create_app
from ovh_webhook.solver import OvhDnsSolver

logger = logging.getLogger(__name__)


def main() -> None:
    config = load_config()
    logging.basicConfig(level=config.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    solver = OvhDnsSolver()
    solver.initialize()
    app = create_app(config.group_name, [solver])

    logger.info("Serving solver %r for group %s on port %d", solver.name(), config.group_name, config.secure_port)
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=config.secure_port,
        ssl_certfile=config.tls_cert_file,
        ssl_keyfile=config.tls_private_key_file,
        log_config=None,
    )


if __name__ == "__main__":
    main()
