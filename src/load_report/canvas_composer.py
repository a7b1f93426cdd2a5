"""Composes rendered charts into one titled canvas."""
import logging
from pathlib import Path
from typing import List, Sequence, Tuple, Union

from PIL import Image, ImageDraw, ImageFont

from .constants import ReportConstants
from .exceptions import ReportIOError


# Configure logging
logger = logging.getLogger(__name__)

PathLike = Union[Path, str]


class CanvasComposer:
    """
    Lays charts into a fixed grid below a title band.

    Layout, top to bottom: title band, headline image (full width), separator,
    two images split by a vertical separator, separator, two more images split
    by a vertical separator.
    """

    def __init__(self,
                 space: int = ReportConstants.CANVAS_SPACE,
                 title_height: int = ReportConstants.CANVAS_TITLE_HEIGHT,
                 line_width: int = ReportConstants.CANVAS_LINE_WIDTH):
        self.space = space
        self.title_height = title_height
        self.line_width = line_width

    @staticmethod
    def load_image(path: PathLike) -> Image.Image:
        """Load an image fully into memory as RGB."""
        try:
            with Image.open(path) as img:
                return img.convert("RGB")
        except OSError as e:
            logger.error(f"Failed to load image {path}: {e}")
            raise ReportIOError(f"Failed to load image {path}") from e

    @property
    def gap(self) -> int:
        """Horizontal distance between the two images of a row."""
        return self.space + self.line_width

    def canvas_size(self, headline: Image.Image, rows: Sequence[Tuple[Image.Image, Image.Image]]) -> Tuple[int, int]:
        """
        Width is the widest row; height adds up row heights, title band,
        spacing and separators.
        """
        row_widths = [left.width + self.gap + right.width for left, right in rows]
        width = max([headline.width] + row_widths)
        row_heights = [max(left.height, right.height) for left, right in rows]
        height = (headline.height + sum(row_heights) + self.space * 4
                  + self.title_height + self.line_width * 2)
        return width, height

    def add_title(self, canvas: Image.Image, title: str) -> None:
        """Draw the title horizontally centered in the title band."""
        if not title:
            return
        draw = ImageDraw.Draw(canvas)
        font = ImageFont.load_default_imagefont()
        # The bitmap font only covers latin-1
        title = title.encode("latin-1", "replace").decode("latin-1")
        left, _, right, _ = draw.textbbox((0, 0), title, font=font)
        x = (canvas.width - (right - left)) // 2
        draw.text((x, ReportConstants.CANVAS_TITLE_TOP_PADDING), title, font=font, fill=ReportConstants.CANVAS_FOREGROUND)

    def draw_line(self, canvas: Image.Image, start: Tuple[int, int], end: Tuple[int, int]) -> None:
        """Fill the rectangle [start, end) in the foreground color."""
        if end[0] <= start[0] or end[1] <= start[1]:
            return
        draw = ImageDraw.Draw(canvas)
        draw.rectangle([start[0], start[1], end[0] - 1, end[1] - 1], fill=ReportConstants.CANVAS_FOREGROUND)

    def compose(self, headline: Image.Image, rows: Sequence[Tuple[Image.Image, Image.Image]], title: str) -> Image.Image:
        """
        Build the canvas from already loaded images.

        Args:
            headline: Full-width image of row 1.
            rows: Exactly two (left, right) image pairs for rows 2 and 3.
            title: Text centered in the title band.
        """
        if len(rows) != 2:
            raise ValueError(f"Expected 2 image rows, got {len(rows)}")

        width, height = self.canvas_size(headline, rows)
        canvas = Image.new("RGB", (width, height), ReportConstants.CANVAS_BACKGROUND)
        self.add_title(canvas, title)

        y = self.title_height + self.space
        canvas.paste(headline, (0, y))
        y += headline.height
        self.draw_line(canvas, (0, y), (width, y + self.line_width))

        for i, (left, right) in enumerate(rows):
            row_top = y + self.space + self.line_width
            canvas.paste(left, (0, row_top))
            self.draw_line(canvas, (left.width, row_top - self.space), (left.width + self.line_width, row_top + left.height))
            canvas.paste(right, (left.width + self.gap, row_top))
            y = row_top + max(left.height, right.height)
            if i < len(rows) - 1:
                self.draw_line(canvas, (0, y), (width, y + self.line_width))

        return canvas

    def combine_images_with_title(self, headline_path: PathLike, row_paths: Sequence[Tuple[PathLike, PathLike]],
                                  output_path: PathLike, title: str) -> Path:
        """
        Load the chart images, compose them and write the canvas as PNG.

        Args:
            headline_path: Image for row 1.
            row_paths: Two (left, right) path pairs for rows 2 and 3.
            output_path: Where to write the combined PNG.
            title: Report title.

        Returns:
            The output path.

        Raises:
            ReportIOError: If an image cannot be loaded or the canvas cannot be written.
        """
        headline = self.load_image(headline_path)
        rows: List[Tuple[Image.Image, Image.Image]] = [
            (self.load_image(left), self.load_image(right)) for left, right in row_paths
        ]
        canvas = self.compose(headline, rows, title)

        try:
            canvas.save(output_path, format="PNG")
        except OSError as e:
            logger.error(f"Failed to write canvas {output_path}: {e}")
            raise ReportIOError(f"Failed to write canvas {output_path}") from e

        logger.info(f"Combined image saved: {output_path} ({canvas.width}x{canvas.height})")
        return Path(output_path)
