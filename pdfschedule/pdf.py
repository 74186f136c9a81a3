"""
Reading positioned text from timetable PDFs.

pdfplumber exposes every glyph of a page as a 'char' dict with its
text and coordinates. We keep them in content-stream order, which is
the order the timetable generator wrote each cell in.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import pdfplumber
from pdfminer.pdfparser import PDFSyntaxError
from pdfplumber.utils.exceptions import PdfminerException

from pdfschedule.errors import PDFReadError
from pdfschedule.model import Token

logger = logging.getLogger(__name__)


def chars_to_tokens(chars: Iterable[Dict[str, Any]]) -> List[Token]:
    """
    Convert pdfplumber char dicts to tokens.

    Chars without text or coordinates are skipped.
    """
    tokens: List[Token] = []
    for c in chars:
        text = c.get("text")
        x0 = c.get("x0")
        top = c.get("top")
        if not text or x0 is None or top is None:
            continue
        tokens.append(Token(text=text, x=float(x0), y=float(top)))
    return tokens


def extract_tokens(pdf_path: str | Path, pages: Optional[List[int]] = None) -> List[Token]:
    """
    Extract tokens from the given pages (1-based), or from all pages.

    Raises FileNotFoundError for a missing file and PDFReadError
    for a file pdfplumber cannot parse.
    """
    path = Path(pdf_path)
    if not path.exists():
        raise FileNotFoundError(f"PDF not found: {path}")

    tokens: List[Token] = []
    try:
        with pdfplumber.open(path) as pdf:
            for pnum, page in enumerate(pdf.pages, 1):
                if pages and pnum not in pages:
                    continue
                page_tokens = chars_to_tokens(page.chars)
                logger.info("page %d: %d tokens", pnum, len(page_tokens))
                tokens.extend(page_tokens)
    except (PdfminerException, PDFSyntaxError) as exc:
        raise PDFReadError(f"cannot read {path}: {exc}") from exc

    return tokens
