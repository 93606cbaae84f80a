"""RDFa extraction pipeline.

DOM parse -> pyRdfa graph extraction -> N-Quads linearization -> expanded
JSON-LD via PyLD. Each step is a separate method so callers and tests can
swap one out without touching the others.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar
from xml.dom import minidom

import html5lib
from pyld import jsonld
from pyRdfa import pyRdfa
from rdflib import Graph

from jsonld_request.schemas import ContentKind


logger = logging.getLogger(__name__)

# html5lib parse error for character data seen before any doctype or element.
TEXT_BEFORE_MARKUP = "expected-doctype-but-got-chars"


class RdfaExtractor:
    """Extract embedded RDFa statements from XML, HTML or XHTML."""

    # pyRdfa picks its host language (processor) from the media type.
    MEDIA_TYPES: ClassVar[dict[ContentKind, str]] = {
        ContentKind.XML: "application/xml",
        ContentKind.HTML: "text/html",
        ContentKind.XHTML: "application/xhtml+xml",
    }

    def parse_dom(
        self, data: str | bytes, kind: ContentKind, *, require_markup: bool = False
    ) -> minidom.Document:
        """Parse markup into a DOM tree using the dialect's parser.

        html5lib accepts any input, so with `require_markup` HTML whose first
        content is text rather than an element is rejected.
        """
        if kind is ContentKind.HTML:
            parser = html5lib.HTMLParser(tree=html5lib.getTreeBuilder("dom"))
            dom = parser.parse(data)
            if require_markup and any(
                code == TEXT_BEFORE_MARKUP for _, code, _ in parser.errors
            ):
                raise ValueError("Content does not start with markup")
            return dom
        return minidom.parseString(data)

    def extract(self, dom: minidom.Document, kind: ContentKind, base: str) -> Graph:
        """Run the RDFa processor over a parsed DOM."""
        processor = pyRdfa(base=base, media_type=self.MEDIA_TYPES[kind])
        return processor.graph_from_DOM(dom, graph=Graph())

    def linearize(self, graph: Graph) -> str:
        """Serialize a graph as N-Quads (N-Triples for the default graph)."""
        return graph.serialize(format="nt")

    def to_document(self, nquads: str) -> list[dict[str, Any]]:
        """Convert N-Quads into expanded JSON-LD."""
        return jsonld.from_rdf(nquads, {"format": "application/n-quads"})

    def extract_document(
        self,
        data: str | bytes,
        kind: ContentKind,
        base: str,
        *,
        require_markup: bool = False,
    ) -> list[dict[str, Any]]:
        """Run the full pipeline for one markup document."""
        if not kind.is_markup:
            raise ValueError(f"Not a markup content kind: {kind}")

        dom = self.parse_dom(data, kind, require_markup=require_markup)
        graph = self.extract(dom, kind, base)
        logger.debug(
            "Extracted RDFa graph",
            extra={"content_kind": str(kind), "base": base, "triples": len(graph)},
        )
        return self.to_document(self.linearize(graph))
