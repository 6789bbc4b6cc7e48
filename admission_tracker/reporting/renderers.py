"""
Document renderers turn a ReportDocument into downloadable bytes. The HTML renderer
hands the page over as-is; users print it to PDF from the browser.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .documents import ReportDocument


@dataclass
class RenderedDocument:
    filename: str
    content: bytes
    media_type: str


class DocumentRenderer(ABC):
    @abstractmethod
    def render(self, document: ReportDocument) -> RenderedDocument:
        ...


class HtmlDocumentRenderer(DocumentRenderer):
    media_type = "text/html; charset=utf-8"

    def render(self, document: ReportDocument) -> RenderedDocument:
        return RenderedDocument(
            filename=document.filename,
            content=document.html.encode("utf-8"),
            media_type=self.media_type,
        )
