"""
Command handlers for Complexity CLI - business logic separated from CLI interface.
"""

import json
from typing import Dict, List, Optional, Sequence, Tuple

import typer

from complexity_cli.analyzer import ComplexityAnalyzer
from complexity_cli.core.data_utils import (
    document_uri,
    parse_line_bound,
    read_document,
    validate_span,
)
from complexity_cli.core.exceptions import ValidationError
from complexity_cli.core.logging import log_context, log_info, logged_operation
from complexity_cli.engine import FunctionCandidate
from complexity_cli.history.store import AnalysisKey, AnalysisRecord, ResultStore
from complexity_cli.output import (
    print_analysis_complete,
    print_candidates,
    print_complexity_footer,
    print_complexity_header,
    print_lens_view,
    print_records,
    print_verdict,
    print_warning,
)

from .options import ResolvedOptions

RecordLookup = Dict[Tuple[str, int], AnalysisRecord]


def _echo_json(payload) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


class CommandHandlers:
    """Handles the business logic for CLI commands."""

    @staticmethod
    def create_analyzer(options: ResolvedOptions, path: str) -> ComplexityAnalyzer:
        """Factory method to create an analyzer for a document."""
        return ComplexityAnalyzer.for_document(language=options.language, filename=path)

    @staticmethod
    def create_store(options: ResolvedOptions) -> ResultStore:
        """Open the persistent store, or an in-memory one when disabled."""
        if options.use_store:
            return ResultStore(options.store_path)
        return ResultStore()

    @staticmethod
    def stored_lookup(store: ResultStore, uri: str) -> RecordLookup:
        return {(r.key.function, r.key.start_line): r for r in store.records(uri)}

    @staticmethod
    def select_targets(
        path: str,
        lines: Sequence[str],
        candidates: Sequence[FunctionCandidate],
        function: Optional[str],
        start: Optional[str],
        end: Optional[str],
    ) -> List[FunctionCandidate]:
        """
        Work out which spans an analyze request refers to.

        An explicit --start/--end span wins, then a function name, then every
        candidate in the document.

        Raises:
            ValidationError: If the request parameters are invalid
        """
        if start is not None or end is not None:
            if start is None or end is None:
                raise ValidationError("--start and --end must be given together")

            start_line = parse_line_bound(start, "start line")
            end_line = parse_line_bound(end, "end line")
            validate_span(start_line, end_line, len(lines))

            name = function
            if name is None:
                starting = [c for c in candidates if c.start_line == start_line]
                if not starting:
                    raise ValidationError(
                        f"No function starts at line {start_line}; pass --function to name the span"
                    )
                name = starting[0].name
            return [FunctionCandidate(name, start_line, end_line)]

        if function is not None:
            matches = [c for c in candidates if c.name == function]
            if not matches:
                available = ", ".join(sorted({c.name for c in candidates})) or "none"
                raise ValidationError(
                    f"No function named '{function}' in {path}. Available: {available}"
                )
            return matches

        return list(candidates)

    @staticmethod
    @logged_operation("scan_command")
    def handle_scan(options: ResolvedOptions, path: str):
        """Handle the scan command."""
        with log_context(document=path, language=options.language):
            uri, lines = read_document(path)
            analyzer = CommandHandlers.create_analyzer(options, path)
            candidates = analyzer.find_functions(lines)
            log_info(f"Found {len(candidates)} candidates ({analyzer.family.value} rules)")

            if options.output_format == "json":
                _echo_json(
                    {
                        "document": uri,
                        "family": analyzer.family.value,
                        "functions": [
                            {
                                "name": c.name,
                                "start_line": c.start_line,
                                "end_line": c.end_line,
                            }
                            for c in candidates
                        ],
                    }
                )
                return

            store = CommandHandlers.create_store(options)
            print_candidates(path, candidates, CommandHandlers.stored_lookup(store, uri))

    @staticmethod
    @logged_operation("analyze_command")
    def handle_analyze(
        options: ResolvedOptions,
        path: str,
        function: Optional[str],
        start: Optional[str],
        end: Optional[str],
    ):
        """Handle the analyze command."""
        with log_context(document=path, language=options.language):
            uri, lines = read_document(path)
            analyzer = CommandHandlers.create_analyzer(options, path)
            candidates = analyzer.find_functions(lines)
            targets = CommandHandlers.select_targets(
                path, lines, candidates, function, start, end
            )

            if not targets:
                print_warning(f"No functions found in {path}")
                return

            store = CommandHandlers.create_store(options)
            as_json = options.output_format == "json"
            results = []

            if not as_json:
                print_complexity_header(path)

            for target in targets:
                with log_context(function=target.name):
                    analysis = analyzer.analyze_function(
                        lines, target.name, target.start_line, target.end_line
                    )
                    record = store.record(
                        AnalysisKey(uri, target.name, target.start_line), analysis.verdict
                    )
                    log_info(
                        f"Analyzed lines {target.start_line}-{target.end_line}: "
                        f"{analysis.verdict.time_complexity} time, "
                        f"{analysis.verdict.space_complexity} space"
                    )

                if as_json:
                    results.append(
                        {
                            "name": target.name,
                            "start_line": target.start_line,
                            "end_line": target.end_line,
                            **analysis.verdict.to_dict(),
                            "timestamp": record.timestamp,
                        }
                    )
                    continue

                explanation = (
                    ComplexityAnalyzer.explain(analysis) if options.show_explanation else None
                )
                print_verdict(target, analysis.verdict, explanation)
                print_analysis_complete(target.name, analysis.verdict)

            if as_json:
                _echo_json({"document": uri, "results": results})
            else:
                print_complexity_footer()

    @staticmethod
    @logged_operation("lens_command")
    def handle_lens(options: ResolvedOptions, path: str):
        """Handle the lens command."""
        with log_context(document=path, language=options.language):
            uri, lines = read_document(path)
            analyzer = CommandHandlers.create_analyzer(options, path)
            candidates = analyzer.find_functions(lines)

            if not candidates:
                print_warning(f"No functions found in {path}")
                return

            store = CommandHandlers.create_store(options)
            print_lens_view(
                lines,
                candidates,
                CommandHandlers.stored_lookup(store, uri),
                options.timestamp_format,
            )

    @staticmethod
    @logged_operation("results_command")
    def handle_results(options: ResolvedOptions, path: Optional[str]):
        """Handle the results command."""
        store = CommandHandlers.create_store(options)
        records = store.records(document_uri(path) if path else None)

        if options.output_format == "json":
            _echo_json([r.to_dict() for r in records])
            return

        print_records(records, options.timestamp_format)
