"""Rich renderables for transcription reports."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..models.report import TranscriptionReport


def build_sentence_table(report: TranscriptionReport) -> Table:
    table = Table(title="Report", expand=True)
    table.add_column("Sentence")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    for sentence in report.sentences:
        table.add_row(sentence.text, f"{sentence.start_time:.2f} s", f"{sentence.end_time:.2f} s")
    return table


def render_report(console: Console, report: TranscriptionReport) -> None:
    """Print transcript, total response time and the sentence table."""
    console.print(Panel(report.transcript or "[dim]No transcript[/dim]", title="Transcript"))
    console.print(f"Total time: {report.response_time:.3f} s")
    console.print(build_sentence_table(report))
