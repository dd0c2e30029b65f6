"""CLI entry point for Brand Tokens.

Orchestrates the full pipeline: document decoding, attribute extraction,
token synthesis, rendering, and QA validation.

Usage::

    # Extract a brand profile from a manual
    python -m src.cli extract manual.pdf -o output/profile.yaml

    # Turn a profile into CSS variables
    python -m src.cli tokens output/profile.yaml \\
        --format flatVariables -o output/tokens.css

    # Document straight to tokens
    python -m src.cli build manual.pdf --format structured -o output/tokens.json

    # Check a (hand-edited) token file
    python -m src.cli validate output/tokens.json

    # Call a tool the way a protocol host would
    python -m src.cli call extract_pdf_branding --args '{"pdfPath": "manual.pdf"}'
"""

import argparse
import json
import sys
from pathlib import Path

from src.analyzer.document_reader import DocumentReader
from src.exceptions import BrandTokensError
from src.extractor.attribute_extractor import AttributeExtractor, ExtractOptions
from src.generator.renderer import render_tokens
from src.processor.synthesizer import TokenSynthesizer, merge_external_data
from src.qa.validator import TokenValidator
from src.schema.loader import dump_data, load_data
from src.schema.models import BrandProfile, OutputFormat
from src.tools.handlers import BrandTokenTools, ToolRequest, list_tools
from src.utils.config import load_settings
from src.utils.log_utils import configure_logging

FORMAT_CHOICES = [f.value for f in OutputFormat] + ["json", "css", "scss"]


# ---------------------------------------------------------------------------
# Pipeline helpers
# ---------------------------------------------------------------------------

def _read_document(path, logger):
    """Decode a document, exiting with an error message on failure."""
    try:
        return DocumentReader(logger=logger).read(path)
    except BrandTokensError as e:
        _error(e.message)


def _extract(args, logger):
    """Run document decoding + extraction for a CLI command."""
    text = _read_document(args.document, logger)
    options = ExtractOptions(
        extract_colors=not getattr(args, "no_colors", False),
        extract_typography=not getattr(args, "no_typography", False),
        extract_logos=not getattr(args, "no_logos", False),
    )
    profile = AttributeExtractor(options=options, logger=logger).extract(text)
    _info(f"Extracted {len(profile.colors)} color(s), "
          f"{len(profile.typography)} font(s), {len(profile.logos)} logo(s)")
    if profile.brand_name:
        _info(f"Brand name: {profile.brand_name}")
    return profile


def _synthesize_and_render(profile, args, logger):
    """Synthesize tokens, optionally QA them, and render to text."""
    tokens = TokenSynthesizer(logger=logger).synthesize(profile)

    if not getattr(args, "skip_qa", False):
        qa_result = TokenValidator().validate(tokens)
        if qa_result.passed:
            _info(qa_result.summary())
        else:
            _warn(qa_result.summary())

    return render_tokens(tokens, args.format)


def _write_text(text, output):
    """Write text to a file, or stdout when no output path is given."""
    if output is None:
        sys.stdout.write(text if text.endswith("\n") else text + "\n")
        return
    path = Path(output)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text if text.endswith("\n") else text + "\n", encoding="utf-8")
    _info(f"Written: {path}")


def _load_mapping(path, what):
    p = Path(path)
    if not p.exists():
        _error(f"{what} file not found: {p}")
    try:
        return load_data(p)
    except BrandTokensError as e:
        _error(e.message)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_extract(args, logger):
    """Extract a BrandProfile from a document."""
    profile = _extract(args, logger)
    if args.output:
        dump_data(profile.to_dict(), args.output)
        _info(f"Written: {args.output}")
    else:
        _write_text(json.dumps(profile.to_dict(), indent=2, ensure_ascii=False), None)


def cmd_tokens(args, logger):
    """Render tokens from a saved BrandProfile (plus optional Figma data)."""
    branding = _load_mapping(args.profile, "Profile")
    figma = _load_mapping(args.figma, "Figma data") if args.figma else None
    try:
        profile = BrandProfile.from_dict(merge_external_data(branding, figma))
    except BrandTokensError as e:
        _error(e.message)
    _write_text(_synthesize_and_render(profile, args, logger), args.output)


def cmd_build(args, logger):
    """Document straight to rendered tokens."""
    profile = _extract(args, logger)
    _write_text(_synthesize_and_render(profile, args, logger), args.output)


def cmd_validate(args, logger):
    """Validate a token file against the baseline structure."""
    data = _load_mapping(args.tokens, "Token")
    qa_result = TokenValidator().validate(data)
    print(qa_result.report())
    sys.exit(0 if qa_result.passed else 1)


def cmd_tools(args, logger):
    """List tool definitions."""
    tools = list_tools()
    if args.verbose:
        print(json.dumps(tools, indent=2, ensure_ascii=False))
        return
    for tool in tools:
        required = ", ".join(tool["inputSchema"].get("required", []))
        print(f"  {tool['name']} ({required}) - {tool['description']}")


def cmd_call(args, logger):
    """Dispatch one tool request and print the response envelope."""
    try:
        arguments = json.loads(args.args) if args.args else {}
    except json.JSONDecodeError as e:
        _error(f"--args is not valid JSON: {e}")
    if not isinstance(arguments, dict):
        _error("--args must be a JSON object")

    try:
        request = ToolRequest.from_dict({"name": args.name, "arguments": arguments})
    except BrandTokensError as e:
        _error(e.message)
    response = BrandTokenTools(logger=logger).handle(request)
    print(json.dumps(response.to_dict(), indent=2, ensure_ascii=False))
    sys.exit(1 if response.is_error else 0)


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------

def _info(msg):
    print(f"  {msg}", file=sys.stderr)


def _warn(msg):
    print(f"  WARNING: {msg}", file=sys.stderr)


def _error(msg):
    print(f"  ERROR: {msg}", file=sys.stderr)
    sys.exit(1)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="brand-tokens",
        description="Extract brand identity from documents and generate design tokens.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # ---- extract ----
    ext = subparsers.add_parser(
        "extract",
        help="Extract a brand profile from a document.",
    )
    ext.add_argument("document", help="Brand manual (.pdf, .pptx, .txt, .md).")
    _add_extract_args(ext)
    ext.add_argument(
        "-o", "--output",
        help="Output profile file (.json or .yaml). Default: stdout.",
    )
    ext.set_defaults(func=cmd_extract)

    # ---- tokens ----
    tok = subparsers.add_parser(
        "tokens",
        help="Generate design tokens from a saved brand profile.",
    )
    tok.add_argument("profile", help="Brand profile file (.json or .yaml).")
    tok.add_argument(
        "--figma",
        help="Figma data file merged over the profile (top-level keys win).",
    )
    _add_render_args(tok)
    tok.set_defaults(func=cmd_tokens)

    # ---- build ----
    bld = subparsers.add_parser(
        "build",
        help="Extract and generate tokens in one step.",
    )
    bld.add_argument("document", help="Brand manual (.pdf, .pptx, .txt, .md).")
    _add_extract_args(bld)
    _add_render_args(bld)
    bld.set_defaults(func=cmd_build)

    # ---- validate ----
    val = subparsers.add_parser(
        "validate",
        help="Validate a token file against the baseline structure.",
    )
    val.add_argument("tokens", help="Token file (.json or .yaml).")
    val.set_defaults(func=cmd_validate)

    # ---- tools ----
    tls = subparsers.add_parser(
        "tools",
        help="List the available tool definitions.",
    )
    tls.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Print full JSON definitions with input schemas.",
    )
    tls.set_defaults(func=cmd_tools)

    # ---- call ----
    cal = subparsers.add_parser(
        "call",
        help="Call a tool with JSON arguments and print the response.",
    )
    cal.add_argument("name", help="Tool name.")
    cal.add_argument("--args", help="Tool arguments as a JSON object.")
    cal.set_defaults(func=cmd_call)

    return parser


def _add_extract_args(parser):
    """Add per-category extraction switches."""
    group = parser.add_argument_group("extraction")
    group.add_argument(
        "--no-colors",
        dest="no_colors",
        action="store_true",
        default=False,
        help="Skip color extraction.",
    )
    group.add_argument(
        "--no-typography",
        dest="no_typography",
        action="store_true",
        default=False,
        help="Skip typography extraction.",
    )
    group.add_argument(
        "--no-logos",
        dest="no_logos",
        action="store_true",
        default=False,
        help="Skip logo detection.",
    )


def _add_render_args(parser):
    """Add --format / --output / --skip-qa args to a subparser."""
    parser.add_argument(
        "-f", "--format",
        choices=FORMAT_CHOICES,
        default=OutputFormat.STRUCTURED.value,
        help="Output format (default: structured).",
    )
    parser.add_argument(
        "-o", "--output",
        help="Output file path. Default: stdout.",
    )
    parser.add_argument(
        "--skip-qa",
        action="store_true",
        default=False,
        help="Skip QA validation of the synthesized tokens.",
    )


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv=None):
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = configure_logging(load_settings())
    args.func(args, logger)


if __name__ == "__main__":
    main()
