"""Find-programs endpoint."""

from fastapi import APIRouter, Depends, Request, Response, status

from models.errors import FinderError
from models.preferences import PreferenceSet
from orchestrator.core import ProgramFinder
from server.dependencies import get_cors_headers, get_finder
from server.schemas.responses import FindProgramsResponseDTO
from server.utils import error_response, json_response
from utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["Programs"])


@router.options("/find-programs")
async def find_programs_preflight(headers: dict[str, str] = Depends(get_cors_headers)):
    """Cross-origin preflight acknowledgment."""
    return Response(status_code=status.HTTP_204_NO_CONTENT, headers=headers)


@router.get("/find-programs", response_model=FindProgramsResponseDTO)
async def find_programs(
    request: Request,
    finder: ProgramFinder = Depends(get_finder),
    headers: dict[str, str] = Depends(get_cors_headers),
):
    """Search for graduate programs matching the caller's preferences."""
    request_id = getattr(request.state, "request_id", "unknown")
    preferences = PreferenceSet.from_params(request.query_params)

    try:
        result = await finder.find(preferences)
    except FinderError as exc:
        logger.warning(
            "Find-programs request failed",
            extra={
                "extra_fields": {
                    "request_id": request_id,
                    "error_type": type(exc).__name__,
                    "status_code": exc.status_code,
                    "error": exc.message,
                }
            },
        )
        return error_response(exc.message, exc.status_code, headers)
    except Exception as exc:
        logger.exception(
            "Unhandled error in find-programs",
            extra={"extra_fields": {"request_id": request_id}},
        )
        return error_response(str(exc) or type(exc).__name__, status.HTTP_500_INTERNAL_SERVER_ERROR, headers)

    logger.info(
        "Find-programs request served",
        extra={"extra_fields": {"request_id": request_id, "count": result.count}},
    )
    return json_response(FindProgramsResponseDTO.from_finder_result(result).to_body(), headers=headers)
