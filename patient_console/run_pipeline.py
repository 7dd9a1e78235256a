"""CLI entrypoint for synthetic admissions.

Pushes faker-generated patients through the same admit -> bill -> receipt
path as the interactive console, optionally exporting one NDJSON bill per
patient.
"""

from __future__ import annotations

import argparse
import json
import os
import random
import sys
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

from faker import Faker

from lib.tariff import DEFAULT_TARIFF, Tariff, load_tariff_yaml

from .billing import choose_billing_strategy
from .departments import register_default_departments
from .generators import gen_patient
from .messages import receipt_lines
from .models import PATIENT_TYPES, Patient
from .notifications import NotificationBroadcaster, PatientManager
from .utils import new_patient_id

def _seeded_id() -> str:
    return f"{random.getrandbits(32):08x}"

def bill_record(p: Patient, amount: Decimal, run_id: str) -> Dict[str, Any]:
    return {
        "run_id": run_id,
        "patient_id": p.id,
        "name": p.name,
        "email": p.email,
        "type": p.type,
        "amount": str(amount),
    }

def write_ndjson(objs: List[Dict[str, Any]], out_path: str) -> None:
    p = Path(out_path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        for o in objs:
            f.write(json.dumps(o))
            f.write("\n")

def generate_run(
    *,
    n_patients: int,
    seed: Optional[int] = None,
    out_path: Optional[str] = None,
    stream: Optional[TextIO] = None,
    tariff: Optional[Tariff] = None,
) -> Dict[str, Any]:
    if seed is not None:
        random.seed(seed)
        Faker.seed(seed)
    id_factory = _seeded_id if seed is not None else new_patient_id

    out = stream if stream is not None else sys.stdout
    tariff = tariff or DEFAULT_TARIFF
    manager = PatientManager(register_default_departments(NotificationBroadcaster(), out, tariff=tariff))

    run_id = f"run_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
    counts = {t: 0 for t in PATIENT_TYPES}
    total = Decimal("0")
    records: List[Dict[str, Any]] = []
    issued: set[str] = set()

    for _ in range(n_patients):
        p = gen_patient(id_factory)
        while p.id in issued:
            p = gen_patient(id_factory)
        issued.add(p.id)

        manager.admit_patient(p)
        amount = manager.apply_billing_strategy(p, choose_billing_strategy(p, tariff))
        for line in receipt_lines(p, amount, tariff.currency_symbol):
            print(line, file=out)

        counts[p.type] += 1
        total += amount
        records.append(bill_record(p, amount, run_id))

    written_files: List[str] = []
    if out_path:
        write_ndjson(records, out_path)
        written_files.append(out_path)

    return {"run_id": run_id, "counts": counts, "total_billed": str(total), "written_files": written_files}

def _parse_args(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Admit and bill synthetic patients through the department notifications.")
    ap.add_argument("--n", type=int, default=5, help="Number of patients")
    ap.add_argument("--seed", type=int, default=None, help="Seed for deterministic runs")
    ap.add_argument("--out", type=str, default=None, help="Optional NDJSON file of generated bills")
    ap.add_argument("--tariff", type=str, default=os.getenv("PATIENT_CONSOLE_TARIFF") or None, help="Tariff YAML overriding prices")
    return ap.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    res = generate_run(
        n_patients=int(args.n),
        seed=args.seed,
        out_path=args.out,
        tariff=load_tariff_yaml(args.tariff),
    )
    print("[DONE]", {"run_id": res["run_id"], "counts": res["counts"], "total_billed": res["total_billed"], "written_files": len(res["written_files"])})
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
