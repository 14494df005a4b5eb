"""
Run a fairness audit from CLI.

Examples:
    python -m scripts.run_audit --demo sex
    python -m scripts.run_audit --file preds.csv --true-col income --pred-col score \
        --group-col sex --mode score --threshold 0.6
    python -m scripts.run_audit --file labels.csv --right-file preds.csv \
        --left-id id --right-id id --true-col y_true --pred-col y_pred --group-col race
    python -m scripts.run_audit --file preds.csv --suggest-columns
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

import pandas as pd
from pydantic import ValidationError

from app.config import get_audit_settings
from app.domain.demo_datasets import DEMO_DATASETS
from app.domain.errors import AuditError
from app.logging_utils import configure_logging
from app.mappers.column_suggester import suggest_columns
from app.mappers.dataframe_rows import dataframe_to_rows
from app.schemas.audit import AuditRequestModel, AuditResponse
from app.services.audit_service import get_audit_service
from app.services.report_export_service import ReportExportService


class CSVInputError(ValueError):
    """
    Raised when an input CSV cannot be read or holds no rows.
    """


def read_csv_rows(path: str) -> tuple[list[dict[str, Any]], list[str]]:
    """
    Parse a CSV file into raw rows, keeping every cell as text.
    """

    try:
        frame = pd.read_csv(
            path,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding="utf-8-sig",
        )
    except (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        raise CSVInputError(f"Could not read CSV {path!r}: {exc}") from exc

    rows = dataframe_to_rows(frame)
    if not rows:
        raise CSVInputError(f"CSV {path!r} parsed but contained no rows.")
    headers = [str(column) for column in frame.columns if str(column).strip()]
    return rows, headers


def build_parser() -> argparse.ArgumentParser:
    defaults = get_audit_settings()
    parser = argparse.ArgumentParser(description="Audit binary classifier predictions for group disparities.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--demo", choices=sorted(DEMO_DATASETS), help="Run a bundled demo dataset.")
    source.add_argument("--file", dest="file", help="CSV with labels/predictions (left side when merging).")
    parser.add_argument("--right-file", dest="right_file", default=None, help="Optional second CSV to merge on id.")
    parser.add_argument("--true-col", dest="true_col", default="")
    parser.add_argument("--pred-col", dest="pred_col", default="", help="Prediction label or score column.")
    parser.add_argument("--group-col", dest="group_col", default="")
    parser.add_argument("--mode", choices=("label", "score"), default="label")
    parser.add_argument("--threshold", type=float, default=defaults.default_threshold)
    parser.add_argument("--left-id", dest="left_id_col", default=None)
    parser.add_argument("--right-id", dest="right_id_col", default=None)
    parser.add_argument("--format", dest="output_format", choices=("json", "csv"), default="json")
    parser.add_argument(
        "--suggest-columns",
        action="store_true",
        help="Print suggested column roles for --file and exit.",
    )
    parser.add_argument("--log-level", dest="log_level", default=None)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    service = get_audit_service()

    try:
        if args.demo:
            result = service.run_demo(args.demo)
        else:
            rows, headers = read_csv_rows(args.file)
            if args.suggest_columns:
                suggestion = suggest_columns(headers)
                print(
                    json.dumps(
                        {
                            "true_col": suggestion.true_col,
                            "pred_col": suggestion.pred_col,
                            "group_col": suggestion.group_col,
                            "mode": suggestion.mode.value,
                        },
                        indent=2,
                    )
                )
                return 0

            request = AuditRequestModel(
                true_col=args.true_col,
                pred_col=args.pred_col,
                group_col=args.group_col,
                mode=args.mode,
                threshold=args.threshold,
                left_id_col=args.left_id_col,
                right_id_col=args.right_id_col,
            ).to_domain()
            right_rows = read_csv_rows(args.right_file)[0] if args.right_file else None
            result = service.run(request, rows, right_rows)
    except AuditError as exc:
        print(json.dumps(exc.to_dict(), indent=2), file=sys.stderr)
        return 2
    except ValidationError as exc:
        print(json.dumps({"code": "invalid_request", "errors": exc.errors()}, indent=2, default=str), file=sys.stderr)
        return 2
    except CSVInputError as exc:
        print(json.dumps({"code": "invalid_csv", "message": str(exc)}, indent=2), file=sys.stderr)
        return 2

    if args.output_format == "csv":
        sys.stdout.write(ReportExportService().to_csv(result))
    else:
        print(json.dumps(AuditResponse.from_result(result).to_payload(), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
