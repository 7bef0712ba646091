"""
Tokenizer and document readers for the search engine index.
Extracts text from plain text and HTML files and tokenizes it line by line.
No stemming or stop-word removal: a token is a lowercased word, optionally
hyphenated or contracted ("well-known", "don't").
"""

import warnings
from pathlib import Path
from typing import Iterable, Iterator

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

from nltk.tokenize import RegexpTokenizer

# Letters, optionally joined to more letters by one hyphen or apostrophe-like glyph.
TOKEN_PATTERN = r"[A-Za-z]+(?:[-'`’][A-Za-z]+)?"

HTML_SUFFIXES = (".html", ".htm")

_TOKENIZER = RegexpTokenizer(TOKEN_PATTERN)


def iter_tokens(line: str) -> Iterator[str]:
    """
    Lazily yield lowercase tokens from a line of text.
    Characters outside the token shape (digits, punctuation, whitespace) are dropped.
    """
    if not line:
        return
    for start, end in _TOKENIZER.span_tokenize(line):
        yield line[start:end].lower()


def tokenize(text: str) -> list[str]:
    """Tokenize text into a list of lowercase word tokens."""
    return [token for line in text.splitlines() for token in iter_tokens(line)]


def extract_text_from_html(html_content: str) -> str:
    """
    Extract visible text from HTML content, stripping tags and scripts.
    Block boundaries become newlines so the text can still be read line by line.
    """
    soup = BeautifulSoup(html_content, "lxml")
    for element in soup(["script", "style"]):
        element.decompose()
    return soup.get_text(separator="\n", strip=True)


def read_text_file(filepath: Path) -> str:
    """
    Read file content, handling common encodings.
    latin-1 decodes any byte sequence, so it is the last fallback.
    """
    raw = Path(filepath).read_bytes()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return raw.decode("latin-1")


def read_document_lines(filepath: Path) -> Iterable[str]:
    """
    Return the text lines of a document.
    HTML files are reduced to their visible text first.
    """
    filepath = Path(filepath)
    content = read_text_file(filepath)
    if filepath.suffix.lower() in HTML_SUFFIXES:
        content = extract_text_from_html(content)
    return content.splitlines()
