#!/usr/bin/env python3
"""Synthetic pending-case report generator for performance testing.

Writes division-wide workbooks in the generic layout:
- row 1: column header (अ.क्र. / अधिकारी / कालावधी / अ.क्र. / गुरनं / दिनांक)
- per station: office header, then officers, each with bucket, case rows, total
- optionally one standard-layout sheet per station (--standard)

Usage:
    python scripts/gen_sample_reports.py --stations 20 --officers 8 --cases 15 -o data/
"""
from __future__ import annotations

import argparse
import sys
from datetime import date, timedelta
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

HEADER = ["अ.क्र.", "अधिकारी / अमंलदार यांचे नाव", "कालावधी", "अ.क्र.", "गुरनं", "दिनांक"]
BUCKETS = ["1 वर्षा वरील", "6 ते 12 महिने", "3 ते 6 महिने", "1 ते 3 महिने"]
# age range in days per bucket, same order as BUCKETS
BUCKET_AGES = [(365, 900), (180, 364), (90, 179), (10, 89)]
DESIGNATIONS = ["PSI", "API", "सपोनि", "पोह", "पोना", "ASI"]
SURNAMES = ["पाटील", "जाधव", "कदम", "शिंदे", "देशमुख", "पवार", "माने", "सावंत", "काळे", "गायकवाड"]
STATIONS = ["शिवाजीनगर", "कोथरूड", "डेक्कन", "हडपसर", "विश्रांतवाडी", "खडक", "स्वारगेट", "वारजे"]


def _station_name(i: int) -> str:
    base = STATIONS[i % len(STATIONS)]
    return base if i < len(STATIONS) else f"{base} {i // len(STATIONS) + 1}"


def _date_text(d: date, style: int) -> str:
    if style == 0:
        return d.strftime("%d-%m-%Y")
    if style == 1:
        return d.strftime("%d/%m/%Y")
    return d.strftime("%d.%m.%Y")


def generate_station_rows(
    rng: np.random.Generator, station: str, officers: int, cases: int, today: date, standard: bool = False
) -> list[list[Any]]:
    """Rows for one station; standard=True puts the office header in row 0."""
    rows: list[list[Any]] = []
    header = f"{station} पोलीस स्टेशन प्रलंबित गुन्हे"
    if standard:
        rows.append([header])
        rows.append(HEADER)
    else:
        rows.append(["", header])
    case_no = 1
    for o in range(officers):
        officer = f"{rng.choice(DESIGNATIONS)} {rng.choice(SURNAMES)}"
        rows.append([str(o + 1), officer])
        per_bucket = np.array_split(np.arange(cases), len(BUCKETS))
        for bucket, ages, chunk in zip(BUCKETS, BUCKET_AGES, per_bucket):
            if len(chunk) == 0:
                continue
            rows.append(["", "", bucket])
            for serial in range(1, len(chunk) + 1):
                age = int(rng.integers(ages[0], ages[1] + 1))
                filed = today - timedelta(days=age)
                rows.append(
                    ["", "", "", str(serial), f"{case_no}/{filed.year}", _date_text(filed, int(rng.integers(0, 3)))]
                )
                case_no += 1
            rows.append(["", "", "एकुण", "", str(len(chunk))])
    return rows


def generate_division_rows(
    stations: int, officers: int, cases: int, seed: int = 42, today: date | None = None
) -> list[list[Any]]:
    """One generic-layout sheet covering every station."""
    rng = np.random.default_rng(seed)
    today = today or date.today()
    rows: list[list[Any]] = [HEADER]
    for i in range(stations):
        rows.extend(generate_station_rows(rng, _station_name(i), officers, cases, today))
    return rows


def write_workbook(path: Path, sheets: dict[str, list[list[Any]]]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        for name, rows in sheets.items():
            pd.DataFrame(rows).to_excel(writer, sheet_name=name[:31], header=False, index=False)
    return path


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Generate synthetic pending-case reports")
    p.add_argument("--stations", type=int, default=10)
    p.add_argument("--officers", type=int, default=5)
    p.add_argument("--cases", type=int, default=12, help="cases per officer")
    p.add_argument("--seed", type=int, default=42)
    p.add_argument("--standard", action="store_true", help="also write one standard-layout sheet per station")
    p.add_argument("-o", "--output-dir", type=Path, default=Path("data"))
    args = p.parse_args(argv)

    if args.stations < 1 or args.officers < 1 or args.cases < 1:
        print("stations, officers and cases must be >= 1", file=sys.stderr)
        return 1

    today = date.today()
    sheets = {"Division": generate_division_rows(args.stations, args.officers, args.cases, args.seed, today)}
    if args.standard:
        rng = np.random.default_rng(args.seed + 1)
        for i in range(args.stations):
            name = _station_name(i)
            sheets[name] = generate_station_rows(rng, name, args.officers, args.cases, today, standard=True)

    out = write_workbook(args.output_dir / "pending_cases.xlsx", sheets)
    total = args.stations * args.officers * args.cases
    print(f"wrote {out} sheets={len(sheets)} cases={total}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
