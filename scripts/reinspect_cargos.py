"""Re-derive the delivery of every stored cargo from its handling history.

Run this after changing derivation rules or after restoring handling events
from a backup: each cargo is inspected again, its snapshot replaced, and the
status projection follows from the DeliveryProgressDerived events. Cargos
that become misdirected or arrived through the re-derivation are announced
like any other.

Prerequisites:
    Database schema and reference data in place: python src/manage.py setup-db && python src/manage.py seed

Usage:
    python scripts/reinspect_cargos.py
    python scripts/reinspect_cargos.py --tracking-id ABC12345 --tracking-id DEF67890
    PROTEAN_ENV=production python scripts/reinspect_cargos.py --batch-size 500
"""

import argparse
import sys
import time

# Add src/ to path so we can import domain modules
sys.path.insert(0, "src")


def main():
    parser = argparse.ArgumentParser(
        description="Re-derive cargo deliveries from their handling histories",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--tracking-id",
        action="append",
        dest="tracking_ids",
        help="Only re-inspect this cargo (repeatable; default: all cargos)",
    )
    parser.add_argument("--batch-size", type=int, default=100, help="Print progress every N cargos (default: 100)")
    args = parser.parse_args()

    from protean.utils.globals import current_domain
    from shipping.cargo.cargo import Cargo
    from shipping.cargo.inspection import inspect_cargo
    from shipping.domain import shipping

    shipping.init()

    print(f"\n{'=' * 60}")
    print("  Shipping: re-inspect cargos")
    print(f"{'=' * 60}\n")

    inspected = 0
    missing = 0
    misdirected = 0
    start = time.monotonic()

    with shipping.domain_context():
        if args.tracking_ids:
            tracking_ids = args.tracking_ids
        else:
            tracking_ids = [cargo.tracking_id for cargo in current_domain.repository_for(Cargo).find_all()]

        for i, tracking_id in enumerate(tracking_ids, start=1):
            cargo = inspect_cargo(tracking_id)
            if cargo is None:
                missing += 1
                print(f"  [SKIP] No cargo with tracking id {tracking_id}")
            else:
                inspected += 1
                if cargo.delivery.is_misdirected:
                    misdirected += 1

            if i % args.batch_size == 0:
                elapsed = time.monotonic() - start
                print(f"  [{time.strftime('%H:%M:%S')}] Inspected {i:,}/{len(tracking_ids):,} ({i / elapsed:.1f}/sec)")

    elapsed = time.monotonic() - start

    print(f"\n{'=' * 60}")
    print(f"  Total time:   {elapsed:.1f}s")
    print(f"  Inspected:    {inspected:,}")
    print(f"  Misdirected:  {misdirected:,}")
    print(f"  Unknown ids:  {missing:,}")
    print(f"{'=' * 60}\n")


if __name__ == "__main__":
    main()
