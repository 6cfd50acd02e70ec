"""Report endpoint: render a canonical summary as a downloadable SRS document."""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from reqbot.models.conversation_models import ErrorResponse
from reqbot.models.summary_models import GenerateReportRequest
from reqbot.services.report import (
    BaseReportRenderer,
    ReportRenderError,
    get_report_renderer,
)

report_router = APIRouter(tags=["Report"])


@report_router.post(
    "/generate-report",
    response_class=Response,
    responses={
        200: {"content": {"application/pdf": {}}, "description": "SRS report"},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def generate_report(
    data: GenerateReportRequest,
    renderer: BaseReportRenderer = Depends(get_report_renderer),
) -> Response:
    """Render ``extractedData`` and return it as an attachment."""
    if data.extracted_data is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="extractedData is required"
        )
    try:
        content = renderer.render(
            data.extracted_data,
            client_name=data.client_name,
            client_email=data.client_email,
            project_name=data.project_name,
        )
    except ReportRenderError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        )
    return Response(
        content=content,
        media_type=renderer.media_type,
        headers={"Content-Disposition": f'attachment; filename="{renderer.filename()}"'},
    )
