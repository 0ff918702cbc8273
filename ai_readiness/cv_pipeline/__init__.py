"""CV upload pipeline: text extraction (PDF/DOCX/TXT) and cleaning."""

from cv_pipeline.text_extractor import clean_cv_text, detect_file_kind, extract_text_from_file

__all__ = ["extract_text_from_file", "detect_file_kind", "clean_cv_text"]
