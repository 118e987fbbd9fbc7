"""PresentationService for rendering meeting metadata as a slide deck.

The deck always has four slides in a fixed order: title, summary, key points
and action items. Positions and font sizes are constants; long lists are not
reflowed and may run past the bottom of a slide.
"""
import io
import logging

from pptx import Presentation
from pptx.util import Inches, Pt

from models.meeting_metadata import MeetingMetadata

logger = logging.getLogger(__name__)

# 16:9 deck
SLIDE_WIDTH = Inches(10)
SLIDE_HEIGHT = Inches(5.625)
BLANK_LAYOUT_INDEX = 6

LEFT = Inches(1)
CONTENT_WIDTH = Inches(8)  # 80% of the slide width
HEADING_TOP = Inches(0.5)
HEADING_HEIGHT = Inches(0.5)
LIST_TOP_INCHES = 1.0
LIST_STEP_INCHES = 0.5
LINE_HEIGHT = Inches(0.5)

TITLE_FONT_SIZE = Pt(24)
HEADING_FONT_SIZE = Pt(18)
BODY_FONT_SIZE = Pt(14)

BULLET = "•"
CORE_PROPERTY_MAX_LENGTH = 255


def add_textbox(slide, left, top, width, height, text, font_size, bold=False):
    """Add a word-wrapped single-paragraph text box to a slide."""
    box = slide.shapes.add_textbox(left, top, width, height)
    frame = box.text_frame
    frame.word_wrap = True
    paragraph = frame.paragraphs[0]
    paragraph.text = text
    paragraph.font.size = font_size
    paragraph.font.bold = bold
    return box


class PresentationService:
    """Renders validated meeting metadata into a .pptx deck."""

    def generate_presentation(self, metadata: MeetingMetadata, meeting_id: str) -> bytes:
        """Render the meeting deck.

        Args:
            metadata: Validated meeting metadata
            meeting_id: Meeting identifier, stored in the deck properties

        Returns:
            Serialized .pptx file contents
        """
        prs = Presentation()
        prs.slide_width = SLIDE_WIDTH
        prs.slide_height = SLIDE_HEIGHT
        # Core properties are limited to 255 characters
        prs.core_properties.title = metadata.title[:CORE_PROPERTY_MAX_LENGTH]
        prs.core_properties.identifier = meeting_id[:CORE_PROPERTY_MAX_LENGTH]

        self._add_title_slide(prs, metadata.title)
        self._add_summary_slide(prs, metadata.description)
        self._add_list_slide(prs, "Key Points", metadata.takeaways)
        self._add_list_slide(
            prs,
            "Action Items",
            [item.description for item in metadata.actionItems]
        )

        buffer = io.BytesIO()
        prs.save(buffer)
        content = buffer.getvalue()

        logger.info(
            f"Presentation generated: meeting_id={meeting_id}, "
            f"slides={len(prs.slides)}, size={len(content)} bytes"
        )
        return content

    def _new_slide(self, prs):
        return prs.slides.add_slide(prs.slide_layouts[BLANK_LAYOUT_INDEX])

    def _add_title_slide(self, prs, title: str) -> None:
        slide = self._new_slide(prs)
        add_textbox(
            slide, LEFT, Inches(1), CONTENT_WIDTH, Inches(1),
            title, TITLE_FONT_SIZE, bold=True
        )

    def _add_summary_slide(self, prs, description: str) -> None:
        slide = self._new_slide(prs)
        add_textbox(
            slide, LEFT, HEADING_TOP, CONTENT_WIDTH, HEADING_HEIGHT,
            "Summary", HEADING_FONT_SIZE, bold=True
        )
        add_textbox(
            slide, LEFT, Inches(1), CONTENT_WIDTH, Inches(4),
            description, BODY_FONT_SIZE
        )

    def _add_list_slide(self, prs, heading: str, lines) -> None:
        """Heading plus one bulleted text box per line, stacked downwards."""
        slide = self._new_slide(prs)
        add_textbox(
            slide, LEFT, HEADING_TOP, CONTENT_WIDTH, HEADING_HEIGHT,
            heading, HEADING_FONT_SIZE, bold=True
        )
        for index, line in enumerate(lines):
            top = Inches(LIST_TOP_INCHES + index * LIST_STEP_INCHES)
            add_textbox(
                slide, LEFT, top, CONTENT_WIDTH, LINE_HEIGHT,
                f"{BULLET} {line}", BODY_FONT_SIZE
            )
