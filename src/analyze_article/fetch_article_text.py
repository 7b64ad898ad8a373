import logging

import requests
from lxml import etree
from lxml import html as lxml_html

from analyze_article.errors import ArticleFetchError, ContentExtractionError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10
DEFAULT_USER_AGENT = "news-company-analyzer/1.0"

TEXT_CONTENT_MARKERS = ("text/", "html", "xml")


def fetch_article_text(
    url: str,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    user_agent: str = DEFAULT_USER_AGENT,
) -> str:
    """
    Fetch an article and return the text of its paragraphs.

    Raises ArticleFetchError when the page cannot be downloaded and
    ContentExtractionError when it has no paragraph text.
    """
    html = fetch_html(url, timeout=timeout, user_agent=user_agent)
    text = extract_paragraph_text(html)
    if not text:
        logger.warning("No paragraph text found at %s", url)
        raise ContentExtractionError()

    logger.info("Extracted %d characters from %s", len(text), url)
    return text


def fetch_html(
    url: str,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    user_agent: str = DEFAULT_USER_AGENT,
) -> str:
    try:
        response = requests.get(
            url,
            timeout=timeout,
            headers={"User-Agent": user_agent},
        )
        response.raise_for_status()
    except requests.RequestException as e:
        raise ArticleFetchError(f"Failed to fetch {url}: {e}") from e

    content_type = response.headers.get("Content-Type")
    if content_type and not any(marker in content_type.lower() for marker in TEXT_CONTENT_MARKERS):
        raise ArticleFetchError(f"Unsupported content type for {url}: {content_type}")

    return response.text


def extract_paragraph_text(html: str) -> str:
    """Concatenate the text content of every <p> element, trimmed."""
    if not html or not html.strip():
        return ""

    try:
        tree = _parse_html(html)
    except etree.ParserError as e:
        raise ContentExtractionError() from e

    text = "".join(paragraph.text_content() for paragraph in tree.xpath("//p"))
    return text.strip()


def _parse_html(html: str):
    try:
        return lxml_html.fromstring(html)
    except ValueError:
        # lxml rejects str input that carries an XML encoding declaration
        return lxml_html.fromstring(html.encode("utf-8"))
