"""Export Coordinator

Renders the active tailored document to DOCX or PDF and hands the file to a
download trigger.
"""
import os
import shutil
import tempfile
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, Union

from .config import DEFAULT_FONT_SIZE
from .document_builder import (
    DocxWriter,
    FontManager,
    PageGeometry,
    PaginatedRenderer,
    PdfWriter,
    build_flow_blocks,
)
from .export_artifact import DocumentKind, ExportArtifact, ExportKind
from .tailoring_result import TailoredDocuments
from .utils import format_file_size, validate_base_name

# (handle_path, artifact) -> delivered path
DownloadTrigger = Callable[[str, ExportArtifact], str]


def save_to_directory(directory: str) -> DownloadTrigger:
    """
    Build a download trigger that copies artifacts into a directory.

    The copy goes through a temporary name and is renamed into place, so a
    failed copy never leaves a partial file under the final name.

    Args:
        directory: Destination directory (created if missing)

    Returns:
        Trigger returning the path of the delivered file
    """
    def _save(handle_path: str, artifact: ExportArtifact) -> str:
        os.makedirs(directory, exist_ok=True)
        output_path = os.path.join(directory, artifact.filename)
        partial_path = output_path + ".part"
        try:
            shutil.copyfile(handle_path, partial_path)
            os.replace(partial_path, output_path)
        finally:
            if os.path.exists(partial_path):
                os.remove(partial_path)
        return output_path

    return _save


@contextmanager
def download_handle(artifact: ExportArtifact) -> Iterator[str]:
    """
    Write an artifact to a transient file and remove it on exit.

    Args:
        artifact: Serialized document

    Yields:
        Path of the transient file, named after the artifact
    """
    temp_dir = tempfile.mkdtemp(prefix="doc_tailor_")
    try:
        handle_path = os.path.join(temp_dir, artifact.filename)
        with open(handle_path, "wb") as f:
            f.write(artifact.data)
        yield handle_path
    finally:
        shutil.rmtree(temp_dir, ignore_errors=True)


class ExportCoordinator:
    """Export orchestrator for tailored documents.

    This class coordinates one export:
    1. Rendering - flow blocks (DOCX) or paginated text runs (PDF)
    2. Serialization - python-docx or ReportLab canvas
    3. Delivery - write a transient file, hand it to the download trigger,
       release the transient file

    Every call re-derives everything from the given text; nothing is cached
    between exports. Failures propagate to the caller without retries.

    Attributes:
        font_manager: Measurer and face provider for PDF output
        geometry: Page size and margins for PDF output
        font_size: Body font size for PDF output
        download: Trigger receiving (handle_path, artifact)
    """

    def __init__(
        self,
        font_manager: Optional[FontManager] = None,
        geometry: Optional[PageGeometry] = None,
        font_size: float = DEFAULT_FONT_SIZE,
        download: Optional[DownloadTrigger] = None,
    ):
        """Initialize coordinator.

        Args:
            font_manager: Font manager for PDF output (Times faces if None)
            geometry: Page geometry for PDF output (A4, 50pt margins if None)
            font_size: Body font size for PDF output
            download: Download trigger (copies into the working directory if None)
        """
        self.font_manager = font_manager or FontManager()
        self.geometry = geometry or PageGeometry()
        self.font_size = font_size
        self.download = download or save_to_directory(os.getcwd())

    def build_artifact(
        self,
        kind: Union[ExportKind, str],
        content: str,
        base_name: str,
    ) -> ExportArtifact:
        """Render and serialize content without delivering it.

        Args:
            kind: ExportKind.FLOW (DOCX) or ExportKind.PAGINATED (PDF)
            content: Plain text to export
            base_name: File name without extension, used verbatim

        Returns:
            ExportArtifact with bytes, file name and MIME type

        Raises:
            InvalidConfigurationError: If kind is unknown or base_name is not a
                plain file name
            MeasurementError: If a line cannot be measured for PDF output
            SerializationError: If the binary packaging step fails
        """
        kind = ExportKind.parse(kind)
        validate_base_name(base_name)

        if kind is ExportKind.FLOW:
            blocks = build_flow_blocks(content)
            print(f"DEBUG: Flow export - {len(blocks)} blocks")
            data = DocxWriter().write(blocks)
        else:
            renderer = PaginatedRenderer(font_size=self.font_size)
            pages = renderer.render(content, self.font_manager, self.geometry)
            run_count = sum(len(page.runs) for page in pages)
            print(f"DEBUG: Paginated export - {len(pages)} page(s), {run_count} text run(s)")
            data = PdfWriter(self.font_manager).write(pages)

        return ExportArtifact(
            data=data,
            filename=f"{base_name}.{kind.extension}",
            mime_type=kind.mime_type,
        )

    def export_as(
        self,
        kind: Union[ExportKind, str],
        content: str,
        base_name: str,
    ) -> str:
        """Export content and trigger its download.

        Args:
            kind: ExportKind.FLOW (DOCX) or ExportKind.PAGINATED (PDF)
            content: Plain text to export
            base_name: File name without extension, used verbatim

        Returns:
            Whatever the download trigger returns (the delivered file path)

        Raises:
            Any error from rendering, serialization or the download trigger;
            the transient file is released on every path.
        """
        artifact = self.build_artifact(kind, content, base_name)

        with download_handle(artifact) as handle_path:
            delivered = self.download(handle_path, artifact)

        print(f"DEBUG: Exported {artifact.filename} ({format_file_size(artifact.size_bytes)})")
        return delivered

    def export_document(
        self,
        kind: Union[ExportKind, str],
        active_document: Union[DocumentKind, str],
        documents: TailoredDocuments,
    ) -> str:
        """Export the active tailored document under its fixed file name.

        Args:
            kind: ExportKind or "flow"/"paginated"/"docx"/"pdf"
            active_document: DocumentKind.CV or DocumentKind.COVER_LETTER
            documents: Caller-owned tailored documents

        Returns:
            Delivered file path (e.g., ".../tailored-cv.pdf")
        """
        active_document = DocumentKind.parse(active_document)
        content = documents.select(active_document)
        return self.export_as(kind, content, active_document.base_name)
