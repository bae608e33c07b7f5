from __future__ import annotations

import argparse
import json
from pathlib import Path

from dotenv import load_dotenv

from majority.config import load_settings
from majority.dataset import coerce_numeric, is_numeric_column, load_values
from majority.langfuse_logger import flush, log_score, log_span, maybe_create_langfuse, start_trace
from majority.sorted_check import is_majority_element
from majority.vote import majority_element


def main() -> None:
    load_dotenv()

    p = argparse.ArgumentParser(description="Find the majority element of one column of a CSV or .txt file.")
    p.add_argument("--input", type=str, required=True, help="Path to a .csv or .txt (one value per line)")
    p.add_argument("--column", type=str, default="", help="CSV column to read (default: first column)")
    p.add_argument("--numeric", action="store_true", help="Parse values as numbers when they all parse")
    p.add_argument("--check", type=str, default=None, help="Also check this value against the sorted column")
    p.add_argument("--run_name", type=str, default="")
    args = p.parse_args()

    settings = load_settings()
    input_path = Path(args.input)

    values = load_values(input_path, args.column or None)
    if args.numeric:
        values = coerce_numeric(values)
    check_value = args.check
    if check_value is not None and is_numeric_column(values):
        check_value = coerce_numeric([check_value])[0]

    langfuse = maybe_create_langfuse(settings.langfuse_public_key, settings.langfuse_secret_key, settings.langfuse_host)
    trace = start_trace(
        langfuse,
        name="majority_element",
        metadata={"input": str(input_path), "column": args.column, "run_name": args.run_name},
        tags=["majority"],
    )

    index = majority_element(values)
    majority_value = None if index is None else values[index]
    log_span(trace, name="majority_vote", input_payload={"total": len(values)},
             output_payload={"index": index, "value": majority_value})
    log_score(trace, name="has_majority", value=0.0 if index is None else 1.0)

    check = None
    if check_value is not None:
        # sort a copy; the loaded column stays in file order
        ordered = sorted(values)
        ok = is_majority_element(ordered, check_value, check_sorted=settings.check_sorted)
        check = {"value": check_value, "is_majority": ok}
        log_span(trace, name="sorted_range_check", input_payload={"value": check_value},
                 output_payload={"is_majority": ok})

    flush(langfuse)

    result = {
        "input": str(input_path),
        "column": args.column or None,
        "total": len(values),
        "majority_index": index,
        "majority_value": majority_value,
        "has_majority": index is not None,
        "check": check,
    }

    print(json.dumps(result, indent=2, default=str))


if __name__ == "__main__":
    main()
