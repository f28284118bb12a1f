from __future__ import annotations
import csv
from typing import Dict, Mapping, Optional

# Known chromatic numbers for the benchmark files, keyed by file name.
KNOWN_OPTIMAL: Dict[str, int] = {
    "myciel3.col.txt": 4,
    "inithx.i.1.col": 54,
    "queen11_11.col": 16,
    "mulsol.i.1.col": 49,
    "school1.col.txt": 15,
    "le450_5a.col": 11,
    "huck.col": 11,
    "le450_15b.col": 18,
    "anna.col": 11,
    "miles1000.col": 42,
    "myciel7.col.txt": 8,
    "latin_square_10.col.txt": 97,
    "jean.col.txt": 10,
    "school1_nsh.col.txt": 21,
}


def load_optimal_table(path: str) -> Dict[str, int]:
    """
    Read a FILENAME,OPTIMAL_SOLUTION csv (header required).
    """
    table: Dict[str, int] = {}
    with open(path, "r", newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        if reader.fieldnames is None or not {"FILENAME", "OPTIMAL_SOLUTION"} <= set(reader.fieldnames):
            raise ValueError(f"{path}: expected columns FILENAME,OPTIMAL_SOLUTION")
        for row in reader:
            name = row["FILENAME"].strip()
            try:
                table[name] = int(row["OPTIMAL_SOLUTION"])
            except ValueError:
                raise ValueError(
                    f"{path}: bad OPTIMAL_SOLUTION for {name!r}: {row['OPTIMAL_SOLUTION']!r}"
                ) from None
    return table


def lookup_optimal(table: Mapping[str, int], name: str) -> Optional[int]:
    return table.get(name)


def is_solved(n_colors: int, optimal: Optional[int]) -> bool:
    if optimal is None:
        return False
    return n_colors <= optimal
