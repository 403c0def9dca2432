import re
import logging
from urllib.parse import quote
from xml.sax.saxutils import escape
from fastapi.responses import Response

logger = logging.getLogger(__name__)

CANVAS_WIDTH = 800
MIN_CANVAS_HEIGHT = 400
CENTER_X = 400
FIRST_MILESTONE_Y = 100
MILESTONE_SPACING = 100

def _milestone_titles(roadmap):
    # Accepts the pydantic RoadmapData or its plain dict form
    milestones = roadmap["milestones"] if isinstance(roadmap, dict) else roadmap.milestones
    return [m["title"] if isinstance(m, dict) else m.title for m in milestones]

def build_flowchart_svg(roadmap) -> str:
    """Render the roadmap's milestones as a top-to-bottom SVG flowchart.

    Layout is fixed: a Start node, one box per milestone spaced 100px apart,
    then a closing "Mastery!" node, all joined by arrowed connectors.
    """
    titles = _milestone_titles(roadmap)
    height = max(120 + len(titles) * MILESTONE_SPACING, MIN_CANVAS_HEIGHT)

    parts = [
        f'<svg width="{CANVAS_WIDTH}" height="{height}" xmlns="http://www.w3.org/2000/svg">',
        '  <defs>',
        '    <marker id="arrowhead" markerWidth="10" markerHeight="7" refX="9" refY="3.5" orient="auto">',
        '      <polygon points="0 0, 10 3.5, 0 7" fill="#4B7BF5" />',
        '    </marker>',
        '  </defs>',
        '  <!-- Start node -->',
        '  <rect x="350" y="20" width="100" height="50" rx="8" fill="#EEF2FF" stroke="#818CF8" stroke-width="2" />',
        f'  <text x="{CENTER_X}" y="50" text-anchor="middle" font-family="sans-serif" font-size="14" '
        'fill="#4F46E5">Start</text>',
    ]

    for i, title in enumerate(titles):
        y = FIRST_MILESTONE_Y + i * MILESTONE_SPACING
        line_start = 70 if i == 0 else y - 30
        parts.extend([
            f'  <line x1="{CENTER_X}" y1="{line_start}" x2="{CENTER_X}" y2="{y - 10}" stroke="#4B7BF5" '
            'stroke-width="2" marker-end="url(#arrowhead)" />',
            '  <!-- Milestone node -->',
            f'  <rect x="250" y="{y}" width="300" height="60" rx="8" fill="#F0F9FF" stroke="#93C5FD" '
            'stroke-width="2" />',
            f'  <text x="{CENTER_X}" y="{y + 35}" text-anchor="middle" font-family="sans-serif" font-size="14" '
            f'font-weight="bold" fill="#1E40AF">{escape(title)}</text>',
        ])

    final_y = FIRST_MILESTONE_Y + len(titles) * MILESTONE_SPACING
    parts.extend([
        f'  <line x1="{CENTER_X}" y1="{final_y + 10}" x2="{CENTER_X}" y2="{final_y + 40}" stroke="#4B7BF5" '
        'stroke-width="2" marker-end="url(#arrowhead)" />',
        '  <!-- End node -->',
        f'  <rect x="350" y="{final_y + 50}" width="100" height="50" rx="8" fill="#ECFDF5" stroke="#6EE7B7" '
        'stroke-width="2" />',
        f'  <text x="{CENTER_X}" y="{final_y + 80}" text-anchor="middle" font-family="sans-serif" font-size="14" '
        'fill="#047857">Mastery!</text>',
        '</svg>',
    ])

    logger.debug(f"Built flowchart with {len(titles)} milestone nodes")
    return "\n".join(parts)

FILENAME_SUFFIX = "-learning-roadmap.svg"

def flowchart_filename(language: str) -> str:
    slug = re.sub(r"\s+", "-", language.lower())
    return f"{slug}{FILENAME_SUFFIX}"

def content_disposition(language: str) -> str:
    """Attachment header that stays latin-1 safe for any language name.

    The plain ``filename`` keeps only printable ASCII without quotes; when
    that loses anything, the full name goes in the RFC 6266 ``filename*`` form.
    """
    filename = flowchart_filename(language)
    ascii_slug = re.sub(r'[^\x20-\x7e]|["\\]', "", filename[:-len(FILENAME_SUFFIX)]).strip("-")
    fallback = f"{ascii_slug}{FILENAME_SUFFIX}" if ascii_slug else FILENAME_SUFFIX.lstrip("-")

    if fallback == filename:
        return f'attachment; filename="{filename}"'
    return f"attachment; filename=\"{fallback}\"; filename*=utf-8''{quote(filename)}"

def flowchart_response(svg: str, language: str) -> Response:
    return Response(
        content=svg,
        media_type="image/svg+xml",
        headers={"Content-Disposition": content_disposition(language)}
    )
