"""Webhook HTTP server — the API cert-manager calls to solve DNS-01 challenges."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from fastapi import Body, FastAPI, HTTPException
from fastapi.responses import PlainTextResponse

from ovh_webhook.errors import WebhookError
from ovh_webhook.models import ChallengeRequest, ChallengeResponse
from ovh_webhook.solver import OvhDnsSolver

logger = logging.getLogger(__name__)

API_VERSION = "v1alpha1"
PAYLOAD_API_VERSION = f"acme.cert-manager.io/{API_VERSION}"
PAYLOAD_KIND = "ChallengePayload"


def solve(solver: OvhDnsSolver, request: ChallengeRequest) -> ChallengeResponse:
    """Run one challenge action and turn solver errors into a failed response."""
    try:
        if request.action == "Present":
            solver.present(request)
        elif request.action == "CleanUp":
            solver.cleanup(request)
        else:
            return ChallengeResponse(uid=request.uid, success=False, message=f"unsupported action {request.action!r}")
    except WebhookError as exc:
        logger.error("%s failed for %s (challenge %s): %s", request.action, request.resolved_fqdn, request.uid, exc)
        return ChallengeResponse(uid=request.uid, success=False, message=str(exc))
    return ChallengeResponse(uid=request.uid, success=True)


def create_app(group_name: str, solvers: Iterable[OvhDnsSolver]) -> FastAPI:
    """Build the webhook app serving ``solvers`` under ``/apis/<group_name>/v1alpha1``."""
    by_name = {solver.name(): solver for solver in solvers}
    group_version = f"{group_name}/{API_VERSION}"
    base_path = f"/apis/{group_version}"

    app = FastAPI(title="cert-manager-webhook-ovh", docs_url=None, redoc_url=None, openapi_url=None)

    @app.get("/healthz", response_class=PlainTextResponse)
    def healthz():
        return "ok"

    @app.get(base_path)
    def discovery():
        return {
            "kind": "APIResourceList",
            "apiVersion": "v1",
            "groupVersion": group_version,
            "resources": [
                {
                    "name": name,
                    "singularName": name,
                    "namespaced": False,
                    "kind": PAYLOAD_KIND,
                    "verbs": ["create"],
                }
                for name in sorted(by_name)
            ],
        }

    @app.post(base_path + "/{solver_name}")
    def challenge(solver_name: str, payload: dict = Body(...)):
        solver = by_name.get(solver_name)
        if solver is None:
            raise HTTPException(status_code=404, detail=f"no solver named {solver_name!r}")
        raw_request = payload.get("request")
        if not isinstance(raw_request, dict):
            raise HTTPException(status_code=400, detail="ChallengePayload has no request")

        request = ChallengeRequest.from_dict(raw_request)
        response = solve(solver, request)
        return {
            "apiVersion": payload.get("apiVersion", PAYLOAD_API_VERSION),
            "kind": PAYLOAD_KIND,
            "request": raw_request,
            "response": response.to_dict(),
        }

    return app
