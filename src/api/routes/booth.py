"""Booth kiosk API routes.

FastAPI router for the voting kiosk front end. The three write
operations map one-to-one onto BoothKioskService; everything else is a
read-only view of the booth.

Error mapping (RFC 7807 problem details):
- InvalidSessionTransitionError / ScanInProgressError -> 409
- VoteIntegrityError -> 409
- UnknownCandidateError -> 422

Authentication failures and duplicate attempts are NOT errors: they are
reported as the outcome of a successful scan request.
"""

from fastapi import APIRouter, Depends, HTTPException, Request

from src.api.dependencies.booth import get_booth_kiosk_service
from src.api.models.booth import (
    ActiveAlertResponse,
    AlertResponse,
    BoothErrorResponse,
    CandidateListResponse,
    CandidateResponse,
    ScanResponse,
    SessionStateResponse,
    StatsResponse,
    VoteRequest,
    VoteResponse,
)
from src.application.services.booth_kiosk_service import BoothKioskService
from src.domain.errors import (
    InvalidSessionTransitionError,
    ScanInProgressError,
    UnknownCandidateError,
    VoteIntegrityError,
)

router = APIRouter(prefix="/v1/booth", tags=["booth"])

_CONFLICT_RESPONSES: dict[int | str, dict[str, object]] = {
    409: {
        "model": BoothErrorResponse,
        "description": "Trigger not allowed in the current session phase",
    },
}


def _transition_problem(
    e: InvalidSessionTransitionError, request: Request
) -> HTTPException:
    in_progress = isinstance(e, ScanInProgressError)
    return HTTPException(
        status_code=409,
        detail={
            "type": (
                "urn:booth:session:scan-in-progress"
                if in_progress
                else "urn:booth:session:invalid-transition"
            ),
            "title": "Scan In Progress" if in_progress else "Invalid Session Transition",
            "status": 409,
            "detail": str(e),
            "instance": str(request.url),
            "phase": e.phase.value,
            "allowed_triggers": list(e.allowed_triggers),
        },
    )


@router.post(
    "/scan",
    response_model=ScanResponse,
    responses=_CONFLICT_RESPONSES,
    summary="Run a biometric authentication attempt",
)
async def start_scan(
    request: Request,
    kiosk: BoothKioskService = Depends(get_booth_kiosk_service),
) -> ScanResponse:
    """Scan the voter and open the ballot on success.

    Raises:
        HTTPException 409: The session is not idle or a scan is running.
    """
    try:
        result = await kiosk.start_scan()
    except InvalidSessionTransitionError as e:
        raise _transition_problem(e, request) from None
    return ScanResponse.from_result(result)


@router.post(
    "/vote",
    response_model=VoteResponse,
    status_code=201,
    responses={
        409: {
            "model": BoothErrorResponse,
            "description": "Ballot not open, or the voter was already marked",
        },
        422: {
            "model": BoothErrorResponse,
            "description": "Candidate is not on the ballot",
        },
    },
    summary="Cast the authenticated voter's vote",
)
async def submit_vote(
    request_data: VoteRequest,
    request: Request,
    kiosk: BoothKioskService = Depends(get_booth_kiosk_service),
) -> VoteResponse:
    """Cast a vote for ``candidate_id``.

    Raises:
        HTTPException 409: Ballot not open, or vote integrity violation.
        HTTPException 422: Unknown candidate; the ballot stays open.
    """
    try:
        receipt = kiosk.submit_vote(request_data.candidate_id)
    except UnknownCandidateError as e:
        raise HTTPException(
            status_code=422,
            detail={
                "type": "urn:booth:ballot:unknown-candidate",
                "title": "Unknown Candidate",
                "status": 422,
                "detail": str(e),
                "instance": str(request.url),
                "candidate_id": e.candidate_id,
            },
        ) from None
    except VoteIntegrityError as e:
        raise HTTPException(
            status_code=409,
            detail={
                "type": "urn:booth:ballot:vote-integrity",
                "title": "Vote Not Recorded",
                "status": 409,
                "detail": str(e),
                "instance": str(request.url),
                "candidate_id": e.candidate_id,
            },
        ) from None
    except InvalidSessionTransitionError as e:
        raise _transition_problem(e, request) from None
    return VoteResponse.from_receipt(receipt)


@router.post(
    "/reset",
    response_model=SessionStateResponse,
    responses=_CONFLICT_RESPONSES,
    summary="Return the booth to idle for the next voter",
)
async def reset_session(
    request: Request,
    kiosk: BoothKioskService = Depends(get_booth_kiosk_service),
) -> SessionStateResponse:
    try:
        state = kiosk.reset_session()
    except InvalidSessionTransitionError as e:
        raise _transition_problem(e, request) from None
    return SessionStateResponse.from_state(state)


@router.get("/session", response_model=SessionStateResponse)
async def get_session(
    kiosk: BoothKioskService = Depends(get_booth_kiosk_service),
) -> SessionStateResponse:
    return SessionStateResponse.from_state(kiosk.get_state())


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    kiosk: BoothKioskService = Depends(get_booth_kiosk_service),
) -> StatsResponse:
    return StatsResponse.from_counters(kiosk.get_stats())


@router.get("/candidates", response_model=CandidateListResponse)
async def get_candidates(
    kiosk: BoothKioskService = Depends(get_booth_kiosk_service),
) -> CandidateListResponse:
    return CandidateListResponse(
        candidates=[CandidateResponse.from_candidate(c) for c in kiosk.get_candidates()]
    )


@router.get("/alert", response_model=ActiveAlertResponse)
async def get_active_alert(
    kiosk: BoothKioskService = Depends(get_booth_kiosk_service),
) -> ActiveAlertResponse:
    """Return the alert on screen, or null once it has auto-dismissed."""
    alert = kiosk.get_active_alert()
    if alert is None:
        return ActiveAlertResponse()
    return ActiveAlertResponse(alert=AlertResponse.from_alert(alert))
