"""Tool handlers - the two brand-token operations behind a request/response envelope.

A host (protocol server, CLI, test) hands a ToolRequest to
``BrandTokenTools.handle`` and always gets a ToolResponse back: failures
are logged and returned as error-flagged text, never raised.

Operations:
    extract_pdf_branding     document path → BrandProfile JSON
    generate_design_tokens   BrandProfile (+ optional external data) → tokens
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from src.analyzer.document_reader import DocumentReader
from src.exceptions import BrandTokensError, InvalidParamsError, ToolNotFoundError
from src.extractor.attribute_extractor import AttributeExtractor, ExtractOptions
from src.generator.renderer import render_tokens
from src.processor.synthesizer import TokenSynthesizer, merge_external_data
from src.schema.models import BrandProfile, OutputFormat


# ---------------------------------------------------------------------------
# Envelope
# ---------------------------------------------------------------------------

@dataclass
class ToolRequest:
    """A named operation plus its argument object."""
    name: str
    arguments: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, d: dict) -> "ToolRequest":
        if not isinstance(d, dict) or not d.get("name"):
            raise InvalidParamsError("Tool request requires a 'name'")
        return cls(name=d["name"], arguments=d.get("arguments") or {})


@dataclass
class ToolResponse:
    """One text block of output, flagged when it describes an error."""
    text: str
    is_error: bool = False

    @property
    def content(self) -> list[dict[str, str]]:
        return [{"type": "text", "text": self.text}]

    def to_dict(self) -> dict:
        d: dict[str, Any] = {"content": self.content}
        if self.is_error:
            d["isError"] = True
        return d

    @classmethod
    def error(cls, exc: Exception) -> "ToolResponse":
        message = exc.message if isinstance(exc, BrandTokensError) else str(exc)
        return cls(text=f"Error: {message}", is_error=True)


# ---------------------------------------------------------------------------
# Tool definitions
# ---------------------------------------------------------------------------

TOOL_DEFINITIONS = [
    {
        "name": "extract_pdf_branding",
        "description": "Extract visual elements and brand identity from a brand manual PDF",
        "inputSchema": {
            "type": "object",
            "properties": {
                "pdfPath": {
                    "type": "string",
                    "description": "Path to the corporate identity manual",
                },
                "extractOptions": {
                    "type": "object",
                    "properties": {
                        "extractColors": {
                            "type": "boolean",
                            "description": "Extract the color palette",
                        },
                        "extractTypography": {
                            "type": "boolean",
                            "description": "Extract typography information",
                        },
                        "extractLogos": {
                            "type": "boolean",
                            "description": "Extract logos and variants",
                        },
                    },
                },
            },
            "required": ["pdfPath"],
        },
    },
    {
        "name": "generate_design_tokens",
        "description": "Generate design tokens from extracted brand identity",
        "inputSchema": {
            "type": "object",
            "properties": {
                "brandingData": {
                    "type": "object",
                    "description": "Extracted brand identity data",
                },
                "figmaData": {
                    "type": "object",
                    "description": "Optional design data exported from Figma",
                },
                "format": {
                    "type": "string",
                    "enum": [f.value for f in OutputFormat],
                    "description": "Output format for the tokens",
                },
            },
            "required": ["brandingData"],
        },
    },
]


def list_tools() -> list[dict[str, Any]]:
    """Definitions of every tool this module handles."""
    return [dict(t) for t in TOOL_DEFINITIONS]


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

class BrandTokenTools:
    """Dispatches tool requests to the extraction and synthesis pipeline.

    Parameters
    ----------
    reader : DocumentReader, optional
        Decodes documents to text. Injected so hosts and tests can swap it.
    logger : logging.Logger, optional
        Receives one info line per call and one error line per failure.
    """

    def __init__(self, reader: DocumentReader | None = None,
                 logger: logging.Logger | None = None):
        self.log = logger or logging.getLogger(__name__)
        self.reader = reader or DocumentReader(logger=self.log)
        self.synthesizer = TokenSynthesizer(logger=self.log)
        self._handlers: dict[str, Callable[[dict[str, Any]], str]] = {
            "extract_pdf_branding": self.extract_pdf_branding,
            "generate_design_tokens": self.generate_design_tokens,
        }

    def handle(self, request: ToolRequest) -> ToolResponse:
        """Run one tool call; errors come back as an error-flagged response."""
        try:
            handler = self._handlers.get(request.name)
            if handler is None:
                raise ToolNotFoundError(f"Unknown tool: {request.name}")
            return ToolResponse(text=handler(request.arguments or {}))
        except Exception as e:
            self.log.error("Error in tool %s: %s", request.name, e)
            return ToolResponse.error(e)

    def extract_pdf_branding(self, arguments: dict[str, Any]) -> str:
        """Decode a document and return its BrandProfile as JSON."""
        pdf_path = arguments.get("pdfPath")
        if not pdf_path:
            raise InvalidParamsError("The document path (pdfPath) is required")

        raw_options = arguments.get("extractOptions")
        if raw_options is not None and not isinstance(raw_options, dict):
            raise InvalidParamsError("extractOptions must be an object")

        self.log.info("Extracting branding from document: %s", pdf_path)
        text = self.reader.read(pdf_path)
        extractor = AttributeExtractor(
            options=ExtractOptions.from_dict(raw_options),
            logger=self.log,
        )
        profile = extractor.extract(text)
        return json.dumps(profile.to_dict(), indent=2, ensure_ascii=False)

    def generate_design_tokens(self, arguments: dict[str, Any]) -> str:
        """Synthesize and render tokens from branding (and external) data."""
        branding = arguments.get("brandingData")
        if branding is None:
            raise InvalidParamsError("Branding data (brandingData) is required")
        if not isinstance(branding, dict):
            raise InvalidParamsError("brandingData must be an object")

        external = arguments.get("figmaData")
        if external is not None and not isinstance(external, dict):
            raise InvalidParamsError("figmaData must be an object")

        self.log.info("Generating design tokens from branding data")
        profile = BrandProfile.from_dict(merge_external_data(branding, external))
        tokens = self.synthesizer.synthesize(profile)
        return render_tokens(tokens, arguments.get("format") or OutputFormat.STRUCTURED)


def call_tool(name: str, arguments: dict[str, Any] | None = None,
              logger: logging.Logger | None = None) -> ToolResponse:
    """Convenience function: handle a single tool call."""
    return BrandTokenTools(logger=logger).handle(ToolRequest(name, arguments or {}))
