"""Tests for the tool request handlers."""

import json
import logging
from unittest.mock import MagicMock

import pytest

from src.exceptions import DocumentNotFoundError
from src.tools.handlers import (
    BrandTokenTools,
    ToolRequest,
    ToolResponse,
    call_tool,
    list_tools,
)

MANUAL = "Brand name: Acme.\nPrimary #FF0000, secondary #00FF00. Headings in Montserrat."


@pytest.fixture
def reader():
    mock = MagicMock()
    mock.read.return_value = MANUAL
    return mock


@pytest.fixture
def tools(reader):
    return BrandTokenTools(reader=reader)


def _call(tools, name, **arguments):
    return tools.handle(ToolRequest(name, arguments))


# ---------------------------------------------------------------------------
# Envelope
# ---------------------------------------------------------------------------

class TestEnvelope:
    def test_success_shape(self):
        assert ToolResponse("ok").to_dict() == {"content": [{"type": "text", "text": "ok"}]}

    def test_error_shape(self):
        d = ToolResponse.error(DocumentNotFoundError("gone")).to_dict()
        assert d == {"content": [{"type": "text", "text": "Error: gone"}], "isError": True}

    def test_error_from_plain_exception(self):
        assert ToolResponse.error(RuntimeError("boom")).text == "Error: boom"

    def test_request_from_dict(self):
        req = ToolRequest.from_dict({"name": "x"})
        assert req.arguments == {}

    def test_list_tools(self):
        tools = list_tools()
        assert [t["name"] for t in tools] == ["extract_pdf_branding", "generate_design_tokens"]
        assert tools[0]["inputSchema"]["required"] == ["pdfPath"]
        assert tools[1]["inputSchema"]["required"] == ["brandingData"]


# ---------------------------------------------------------------------------
# extract_pdf_branding
# ---------------------------------------------------------------------------

class TestExtractPdfBranding:
    def test_extracts_profile(self, tools, reader):
        response = _call(tools, "extract_pdf_branding", pdfPath="/docs/manual.pdf")
        assert not response.is_error
        reader.read.assert_called_once_with("/docs/manual.pdf")

        profile = json.loads(response.text)
        assert profile["brandName"] == "Acme"
        assert [c["hex"] for c in profile["colors"]] == ["#FF0000", "#00FF00"]
        assert profile["colors"][0]["category"] == "primary"
        assert profile["typography"] == [{"family": "Montserrat", "category": "heading"}]

    def test_missing_path(self, tools, reader):
        response = _call(tools, "extract_pdf_branding")
        assert response.is_error
        assert "pdfPath" in response.text
        reader.read.assert_not_called()

    def test_empty_path(self, tools, reader):
        response = _call(tools, "extract_pdf_branding", pdfPath="")
        assert response.is_error
        reader.read.assert_not_called()

    def test_options_disable_colors(self, tools):
        response = _call(tools, "extract_pdf_branding", pdfPath="m.pdf",
                         extractOptions={"extractColors": False})
        profile = json.loads(response.text)
        assert profile["colors"] == []
        assert profile["typography"]

    def test_bad_options(self, tools):
        response = _call(tools, "extract_pdf_branding", pdfPath="m.pdf",
                         extractOptions="colors")
        assert response.is_error

    def test_reader_error(self, tools, reader):
        reader.read.side_effect = DocumentNotFoundError("Document does not exist: m.pdf")
        response = _call(tools, "extract_pdf_branding", pdfPath="m.pdf")
        assert response.is_error
        assert response.text == "Error: Document does not exist: m.pdf"


# ---------------------------------------------------------------------------
# generate_design_tokens
# ---------------------------------------------------------------------------

class TestGenerateDesignTokens:
    def test_structured_default(self, tools):
        branding = {"brandName": "Acme",
                    "colors": [{"hex": "#ff0000", "category": "primary"}]}
        response = _call(tools, "generate_design_tokens", brandingData=branding)
        tokens = json.loads(response.text)
        assert tokens["colors"]["primary"]["500"] == "#ff0000"
        assert tokens["metadata"]["brandName"] == "Acme"

    def test_empty_branding_gives_baseline(self, tools):
        response = _call(tools, "generate_design_tokens", brandingData={})
        assert not response.is_error
        tokens = json.loads(response.text)
        assert tokens["metadata"]["brandName"] == "Unnamed Brand"
        assert tokens["colors"]["primary"]["500"] == "#0066c5"

    def test_missing_branding(self, tools):
        response = _call(tools, "generate_design_tokens")
        assert response.is_error
        assert "brandingData" in response.text

    def test_figma_overrides(self, tools):
        branding = {"colors": [{"hex": "#111111", "category": "primary"}]}
        figma = {"colors": [{"hex": "#222222", "category": "primary"}]}
        response = _call(tools, "generate_design_tokens",
                         brandingData=branding, figmaData=figma)
        assert json.loads(response.text)["colors"]["primary"]["500"] == "#222222"

    def test_css_format(self, tools):
        response = _call(tools, "generate_design_tokens", brandingData={},
                         format="flatVariables")
        assert response.text.startswith(":root {")

    def test_scss_alias(self, tools):
        response = _call(tools, "generate_design_tokens", brandingData={}, format="scss")
        assert "$color-primary-500: #0066c5;" in response.text

    def test_unknown_format_falls_back(self, tools):
        response = _call(tools, "generate_design_tokens", brandingData={}, format="xml")
        assert not response.is_error
        json.loads(response.text)

    def test_non_string_format_falls_back(self, tools):
        response = _call(tools, "generate_design_tokens", brandingData={}, format=["css"])
        assert not response.is_error
        assert json.loads(response.text)["metadata"]["brandName"] == "Unnamed Brand"

    def test_invalid_branding_shape(self, tools):
        response = _call(tools, "generate_design_tokens",
                         brandingData={"colors": [{"hex": "#fff", "category": "loud"}]})
        assert response.is_error


# ---------------------------------------------------------------------------
# Dispatch and logging
# ---------------------------------------------------------------------------

class TestDispatch:
    def test_unknown_tool(self, tools):
        response = _call(tools, "delete_everything")
        assert response.is_error
        assert response.text == "Error: Unknown tool: delete_everything"

    def test_logs_call_and_failure(self, reader, caplog):
        logger = logging.getLogger("test.tools")
        tools = BrandTokenTools(reader=reader, logger=logger)
        with caplog.at_level(logging.INFO, logger="test.tools"):
            _call(tools, "extract_pdf_branding", pdfPath="m.pdf")
            _call(tools, "generate_design_tokens")

        messages = [(r.levelno, r.getMessage()) for r in caplog.records]
        assert (logging.INFO, "Extracting branding from document: m.pdf") in messages
        assert any(level == logging.ERROR and "generate_design_tokens" in msg
                   for level, msg in messages)

    def test_call_tool_reads_real_file(self, tmp_path):
        path = tmp_path / "manual.txt"
        path.write_text(MANUAL, encoding="utf-8")
        response = call_tool("extract_pdf_branding", {"pdfPath": str(path)})
        assert json.loads(response.text)["brandName"] == "Acme"

    def test_call_tool_missing_file(self, tmp_path):
        response = call_tool("extract_pdf_branding", {"pdfPath": str(tmp_path / "x.pdf")})
        assert response.is_error
        assert response.text.startswith("Error: Document does not exist")
