"""
Toy key-value store for errstack

What this shows:
- wrapping failures with new_with at each layer
- the traced decorator building the same stack automatically
- NotFound detection through frames
- collecting independent failures in an ErrorList
- detail vs summary output, and the structured JSON report
"""

from __future__ import annotations

from typing import Dict

from errstack import ErrorList, NotFound, is_not_found, new, new_with, report, traced

STORE: Dict[str, str] = {"alpha": "1", "beta": "not-a-number"}


def read(key: str) -> str:
    if key not in STORE:
        raise new_with(NotFound("key"), "lookup", 0, "read", key)
    return STORE[key]


@traced(code="int()")
def read_int(key: str) -> int:
    return int(read(key))


def main() -> None:
    errs = ErrorList()
    for key in ("alpha", "beta", "gamma"):
        try:
            print(f"{key} = {read_int(key)}")
        except Exception as e:
            print(f"{key}: {e:s} (not found: {is_not_found(e)})")
            errs.add(e)

    errs.add(new("shutdown requested"))
    final = errs.to_error()
    if final is not None:
        print("\n--- detail ---")
        print(final)
        print("--- report ---")
        print(report(final).to_json())


if __name__ == "__main__":
    main()
