"""Apply tracked matrices to PDF page content with pypdf.

PDF ``cm`` matrices use the same ``(a, b, c, d, e, f)`` order as canvas
transforms, so a matrix read back from ``getTransform`` or produced by a
replay script can be applied to page content directly. PDF user space is
y-up, so the same matrix turns content the opposite visual direction from
a y-down canvas.
"""

from pathlib import Path

from pypdf import PageObject, PdfReader, PdfWriter, Transformation

from canvasmatrix.logging_config import get_logger
from canvasmatrix.matrix import IDENTITY, Matrix

logger = get_logger(__name__)


def to_transformation(matrix: Matrix) -> Transformation:
    """Convert a matrix to a pypdf Transformation."""
    return Transformation(ctm=tuple(float(v) for v in matrix))


def apply_to_page(page: PageObject, matrix: Matrix) -> PageObject:
    """
    Transform the content of a page by ``matrix``.

    The mediabox is left as it is; content moved outside it is clipped
    by viewers.

    Args:
        page: The page to transform
        matrix: Matrix to apply

    Returns:
        The page (mutates in place and returns)
    """
    if tuple(matrix) == IDENTITY:
        return page
    page.add_transformation(to_transformation(matrix))
    return page


def apply_to_pdf(input_path: Path, output_path: Path, matrix: Matrix) -> int:
    """
    Write a copy of a PDF with every page transformed by ``matrix``.

    Args:
        input_path: Source PDF
        output_path: Destination PDF (parent directories are created)

    Returns:
        Number of pages written
    """
    if not input_path.exists():
        raise FileNotFoundError(f"PDF file not found: {input_path}")

    reader = PdfReader(str(input_path))
    writer = PdfWriter()
    for page in reader.pages:
        writer.add_page(apply_to_page(page, matrix))

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "wb") as f:
        writer.write(f)

    logger.debug("Wrote %d page(s) to %s", len(reader.pages), output_path)
    return len(reader.pages)
