"""Command-line interface for the Thai ID card OCR service."""

import asyncio
import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .core.types import CardRecord
from .ocr.extract import card_extractor
from .utils.config import settings
from .utils.error_handler import ThaiIDOCRError
from .utils.log import configure_logging, get_logger
from .utils.validation import validate_image_uri
from .vision.client import VisionClient

# Configure logging
configure_logging()
logger = get_logger(__name__)

# Rich console
console = Console()

app = typer.Typer(
    name="thaiid-ocr",
    help="Thai ID card OCR - extract card fields from Vision text detection",
    add_completion=False
)

FIELD_LABELS = {
    "idCardNumber": "ID Card Number",
    "name": "Name",
    "lastName": "Last Name",
    "dateOfBirth": "Date of Birth",
    "address": "Address",
    "dateOfIssue": "Date of Issue",
    "dateOfExpiry": "Date of Expiry",
}


def render_record(record: CardRecord, as_json: bool, title: str = "Card Fields") -> None:
    data = record.to_dict()
    if as_json:
        console.print_json(json.dumps(data, ensure_ascii=False))
        return

    table = Table(title=title)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")
    for key, label in FIELD_LABELS.items():
        table.add_row(label, data[key] or "[red]Not found[/red]")
    console.print(table)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address (default: HOST setting)"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port (default: PORT setting)"),
):
    """Run the HTTP API."""
    import uvicorn

    bind_host = host or settings.HOST
    bind_port = port or settings.PORT
    console.print(f"[bold blue]Starting server on {bind_host}:{bind_port}[/bold blue]")
    logger.info("Starting server", host=bind_host, port=bind_port)
    uvicorn.run("thaiid_ocr.api.server:app", host=bind_host, port=bind_port, log_config=None)


@app.command()
def parse(
    text_file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="File holding OCR text"),
    as_json: bool = typer.Option(False, "--json", help="Print the record as JSON"),
):
    """Extract card fields from a saved OCR text file."""
    text = text_file.read_text(encoding="utf-8")
    record = card_extractor.extract_card_record(text)
    render_record(record, as_json, title=f"Card Fields: {text_file.name}")


@app.command()
def scan(
    image_uri: str = typer.Argument(..., help="http(s):// or gs:// URI of the card image"),
    as_json: bool = typer.Option(False, "--json", help="Print the record as JSON"),
):
    """Send an image URI to Vision and extract card fields from the result."""

    async def _detect(uri: str) -> str:
        async with VisionClient(
            api_key=settings.API_KEY,
            endpoint=settings.VISION_API_URL,
            timeout_s=settings.VISION_TIMEOUT_S,
            feature_type=settings.VISION_FEATURE_TYPE,
        ) as client:
            return await client.detect_text(uri)

    try:
        uri = validate_image_uri(image_uri)
        with console.status("[bold green]Detecting text...", spinner="dots"):
            text = asyncio.run(_detect(uri))
    except ThaiIDOCRError as e:
        console.print(f"[red]❌ {e.message}[/red]")
        logger.error("Scan failed", error=str(e), error_type=type(e).__name__)
        raise typer.Exit(1)

    if not text:
        console.print("[yellow]⚠ No text detected in image[/yellow]")

    record = card_extractor.extract_card_record(text)
    render_record(record, as_json)


if __name__ == "__main__":
    app()
