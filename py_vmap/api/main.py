"""FastAPI application serving the single-page Voronoi map form."""

import html
from typing import Optional

from fastapi import FastAPI, Form, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field
import structlog

from .. import __version__
from ..config import settings
from ..core.exceptions import InvalidInput
from ..core.parsing import parse_points
from ..core.pipeline import create_voronoi
from ..utils.logging import configure_logging

configure_logging(settings.log_level, settings.log_format)

logger = structlog.get_logger()

# Initialize FastAPI app
app = FastAPI(
    title="Voronoi Map API",
    description="Voronoi maps with a squiggly, hand-drawn outer edge",
    version=__version__,
)

SAMPLE_POINTS = "x,y\n0,0\n10,0\n0,10\n10,10"

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>Voronoi Map</title>
</head>
<body>
  <form id="voronoiDataForm" method="post" action="/voronoi">
    <label for="voronoiPoints">Points (CSV with x and y columns)</label><br>
    <textarea id="voronoiPoints" name="voronoiPoints" rows="12" cols="30">{points}</textarea><br>
    <button type="submit">Draw</button>
  </form>
  {error}
  <div id="voronoi">{svg}</div>
</body>
</html>
"""


def render_page(points: str = SAMPLE_POINTS, svg: Optional[str] = None,
                error: Optional[str] = None) -> str:
    """Fill the page template; an empty canvas is shown until a diagram exists."""
    if svg is None:
        svg = (f'<svg xmlns="http://www.w3.org/2000/svg" width="{settings.canvas_width}" '
               f'height="{settings.canvas_height}"></svg>')
    error_html = f'<p class="error">{html.escape(error)}</p>' if error else ""
    return PAGE_TEMPLATE.format(points=html.escape(points), svg=svg, error=error_html)


# Request/Response models
class VoronoiRequest(BaseModel):
    """Request to draw a Voronoi map."""

    points: str = Field(..., description="CSV text with x and y columns")
    seed: Optional[str] = Field(None, description="Seed for the squiggly layer")
    track_cell_identity: Optional[bool] = Field(
        None, description="Attribute cells by point instead of by position"
    )


class BoundsModel(BaseModel):
    min_x: int
    min_y: int
    max_x: int
    max_y: int


class VoronoiResponse(BaseModel):
    """A rendered Voronoi map."""

    seed: str
    width: int
    height: int
    bounds: BoundsModel
    points_count: int
    squiggly_points_count: int
    cells_count: int
    degenerate_count: int
    svg: str


@app.on_event("startup")
async def startup_event():
    logger.info("Starting Voronoi Map API", version=__version__)


# API endpoints
@app.get("/", response_class=HTMLResponse)
async def index():
    """Single-page form with an empty canvas."""
    return render_page()


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/voronoi", response_class=HTMLResponse)
def submit_form(voronoi_points: str = Form("", alias="voronoiPoints")):
    """Handle a form submission: one submission draws one diagram."""
    logger.info("Form submitted", size=len(voronoi_points))
    try:
        voronoi_map = create_voronoi(parse_points(voronoi_points))
    except InvalidInput as e:
        logger.warning("Rejected point data", error=str(e))
        return HTMLResponse(render_page(voronoi_points, error=str(e)), status_code=422)
    return HTMLResponse(render_page(voronoi_points, svg=voronoi_map.to_svg()))


@app.post("/api/voronoi", response_model=VoronoiResponse)
def draw_voronoi(request: VoronoiRequest):
    """Draw a Voronoi map and return it as SVG with a summary."""
    logger.info("Voronoi map requested", seed=request.seed)
    try:
        voronoi_map = create_voronoi(
            parse_points(request.points),
            seed=request.seed,
            track_cell_identity=request.track_cell_identity,
        )
    except InvalidInput as e:
        logger.warning("Rejected point data", error=str(e))
        raise HTTPException(status_code=422, detail=str(e))

    return VoronoiResponse(
        seed=voronoi_map.seed,
        width=int(voronoi_map.scene.width),
        height=int(voronoi_map.scene.height),
        bounds=BoundsModel(**voronoi_map.bounds._asdict()),
        points_count=len(voronoi_map.points),
        squiggly_points_count=len(voronoi_map.squiggly_points),
        cells_count=len(voronoi_map.cells),
        degenerate_count=voronoi_map.degenerate_count,
        svg=voronoi_map.to_svg(),
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
