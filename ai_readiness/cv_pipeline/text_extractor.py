"""Extract raw text from uploaded CV files (PDF, DOCX, TXT). In-memory only."""

import re
import unicodedata
from io import BytesIO
from typing import Optional

import pdfplumber
from docx import Document

from config import MAX_CV_CHARS
from evaluation.errors import ExtractionError, UnsupportedFileTypeError
from utils.logger import get_logger

logger = get_logger(__name__)

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TXT_MIME = "text/plain"

UNSUPPORTED_MESSAGE = "Unsupported file type. Please upload a .pdf, .docx, or .txt file."


def _normalize_unicode(text: str) -> str:
    """Normalize unicode (NFC) and replace problematic chars."""
    if not text:
        return ""
    return unicodedata.normalize("NFC", text).replace("\x00", "")


def clean_cv_text(text: str, max_chars: Optional[int] = None) -> str:
    """Remove excessive whitespace and normalize unicode for CV content."""
    if not text or not text.strip():
        return ""
    t = _normalize_unicode(text)
    t = t.replace("\r\n", "\n").replace("\r", "\n")
    t = re.sub(r"[ \t]+", " ", t)
    t = re.sub(r"\n\s*\n\s*\n", "\n\n", t)
    t = t.strip()
    if max_chars is None:
        max_chars = MAX_CV_CHARS
    if len(t) > max_chars:
        t = t[:max_chars] + "\n\n[Content truncated.]"
    return t


def detect_file_kind(filename: Optional[str], content_type: Optional[str] = None) -> Optional[str]:
    """Return "pdf", "docx" or "txt" from MIME type or extension; None if unsupported."""
    mime = (content_type or "").split(";")[0].strip().lower()
    name_lower = (filename or "").lower().strip()
    if mime == PDF_MIME or name_lower.endswith(".pdf"):
        return "pdf"
    if mime == DOCX_MIME or name_lower.endswith(".docx"):
        return "docx"
    if mime == TXT_MIME or name_lower.endswith(".txt"):
        return "txt"
    return None


def _extract_pdf(bytes_io: BytesIO) -> str:
    """Extract text from PDF using pdfplumber."""
    with pdfplumber.open(bytes_io) as pdf:
        parts = []
        for page in pdf.pages:
            ptext = page.extract_text()
            if ptext:
                parts.append(ptext)
        return "\n\n".join(parts)


def _extract_docx(bytes_io: BytesIO) -> str:
    """Extract text from DOCX using python-docx (paragraphs, then table cells)."""
    doc = Document(bytes_io)
    parts = [p.text for p in doc.paragraphs if p.text.strip()]
    for table in doc.tables:
        for row in table.rows:
            cells = [c.text.strip() for c in row.cells if c.text.strip()]
            if cells:
                parts.append(" | ".join(cells))
    return "\n\n".join(parts)


def _extract_txt(file_bytes: bytes) -> str:
    return file_bytes.decode("utf-8-sig", errors="replace")


def extract_text_from_file(
    file_bytes: bytes,
    filename: Optional[str],
    content_type: Optional[str] = None,
) -> str:
    """
    Extract and clean text from an uploaded CV file (PDF, DOCX or TXT).
    File is read from bytes in memory; no disk write.
    Raises UnsupportedFileTypeError for other types and ExtractionError if parsing fails.
    """
    kind = detect_file_kind(filename, content_type)
    if kind is None:
        logger.warning("Unsupported file type: name=%s type=%s", filename, content_type)
        raise UnsupportedFileTypeError(UNSUPPORTED_MESSAGE)

    logger.debug("Parsing %s file %s (%s bytes)", kind, filename, len(file_bytes))
    if kind == "pdf":
        try:
            raw = _extract_pdf(BytesIO(file_bytes))
        except Exception as e:
            logger.exception("PDF extraction failed: %s", e)
            raise ExtractionError(
                "PDF parsing failed. Please try uploading a .docx file instead.",
                debug=str(e),
            ) from e
    else:
        try:
            raw = _extract_docx(BytesIO(file_bytes)) if kind == "docx" else _extract_txt(file_bytes)
        except Exception as e:
            logger.exception("%s extraction failed: %s", kind.upper(), e)
            raise ExtractionError("Failed to read file content.", debug=str(e) or type(e).__name__) from e

    text = clean_cv_text(raw)
    logger.info("Extracted %s characters from %s file", len(text), kind)
    return text
