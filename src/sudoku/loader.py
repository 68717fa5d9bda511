import json
import os
from numbers import Integral
from typing import Any, Dict, List, Optional

import pandas as pd

_PUZZLE_COLUMNS = ("puzzle", "quizzes", "quiz", "grid")
_SOLUTION_COLUMNS = ("solution", "solutions")


def load_puzzles(file_path: str) -> List[Dict[str, Any]]:
    """
    Reads puzzles from a dataset file. Handles .csv, .parquet, .json, .jsonl and .txt.
    Returns a list of records shaped {"id", "puzzle", "solution"?}.
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    def _is_nonempty_str(value: Any) -> bool:
        return isinstance(value, str) and value.strip() != ""

    def _pick(record: Dict[str, Any], keys) -> Optional[str]:
        for key in keys:
            value = record.get(key)
            if _is_nonempty_str(value):
                return value.strip()
            # Numeric-looking columns may come back as ints from pandas.
            if isinstance(value, Integral) and not isinstance(value, bool):
                return str(value).zfill(81)
        return None

    def _clean_id(raw: Any) -> Optional[str]:
        if raw is None or (not isinstance(raw, str) and pd.isna(raw)):
            return None
        text = str(raw).strip()
        return text or None

    def _normalize_record(record: Dict[str, Any], position: int) -> Optional[Dict[str, Any]]:
        lowered = {str(k).strip().lower(): v for k, v in record.items()}
        puzzle = _pick(lowered, _PUZZLE_COLUMNS)
        if puzzle is None:
            return None
        normalized: Dict[str, Any] = {"puzzle": puzzle}
        normalized["id"] = _clean_id(lowered.get("id")) or str(position)
        solution = _pick(lowered, _SOLUTION_COLUMNS)
        if solution is not None:
            normalized["solution"] = solution
        return normalized

    def _normalize_all(records: List[Any]) -> List[Dict[str, Any]]:
        data = []
        for position, record in enumerate(records, start=1):
            if not isinstance(record, dict):
                continue
            normalized = _normalize_record(record, position)
            if normalized is not None:
                data.append(normalized)
        return data

    # Case 1: CSV / Parquet (tabular datasets)
    if file_path.endswith(".csv"):
        df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        return _normalize_all(df.to_dict(orient="records"))

    if file_path.endswith(".parquet"):
        df = pd.read_parquet(file_path)
        return _normalize_all(df.to_dict(orient="records"))

    # Case 2: JSON File (array or object)
    if file_path.endswith(".json"):
        with open(file_path, "r", encoding="utf-8") as f:
            try:
                payload = json.load(f)
            except json.JSONDecodeError:
                payload = None
        if isinstance(payload, list):
            return _normalize_all(payload)
        if isinstance(payload, dict):
            return _normalize_all([payload])
        if payload is not None:
            return []
        # Some sources use ".json" but actually store JSONL; fall through.

    # Case 3: plain text, one puzzle per non-empty line
    if file_path.endswith(".txt"):
        with open(file_path, "r", encoding="utf-8") as f:
            lines = [line.strip() for line in f if line.strip()]
        return [{"id": str(i), "puzzle": line} for i, line in enumerate(lines, start=1)]

    # Case 4: JSONL File
    records = []
    with open(file_path, "r", encoding="utf-8") as f:
        for line in f:
            if not line.strip():
                continue
            try:
                records.append(json.loads(line))
            except json.JSONDecodeError:
                continue
    return _normalize_all(records)
