#!/usr/bin/env python3
"""
Quick verification that the workboard works end-to-end.

Usage:
    python verify_workboard.py [--config workboard.yaml]
"""
import argparse
import sys
import threading

from workboard import Workboard, WorkStatus, ValidationError
from workboard.config import configure_logging


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Workboard end-to-end check")
    parser.add_argument("--config", help="Path to a workboard YAML config")
    args = parser.parse_args(argv)

    board = Workboard.from_config_file(args.config)
    configure_logging(board.config)

    print("=" * 60)
    print("Workboard Verification")
    print("=" * 60)

    print("\n[1/6] Adding team member...")
    ana = board.store.create_member("Ana", "ana@x.com")
    print(f"✅ Member {ana.member_id}: {ana.name} <{ana.email}>")

    print("\n[2/6] Creating and assigning a work item...")
    item = board.store.create_item("Fix bug", "Crash on empty title")
    board.integrity.assign(item.item_id, ana.member_id)
    print(f"✅ Item {item.item_id}: {item.title}")
    print(f"   Workload for {ana.name}: {board.queries.assigned_workload_count(ana.member_id)}")

    print("\n[3/6] Walking the status graph...")
    for status in (WorkStatus.BLOCKED, WorkStatus.COMPLETED, WorkStatus.ACTIVE):
        board.status.set_status(item.item_id, status)
        print(f"   → {board.store.get_item(item.item_id).status.value}")

    print("\n[4/6] Rejecting invalid input...")
    try:
        board.store.create_item("")
    except ValidationError as e:
        print(f"✅ Rejected: {e}")
    else:
        print("❌ Empty title was accepted")
        return 1

    print("\n[5/6] Concurrent creation...")
    threads = [
        threading.Thread(target=board.store.create_item, args=(f"Task {n}",))
        for n in range(50)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    ids = [i.item_id for i in board.store.all_items()]
    if len(ids) != len(set(ids)) or len(ids) != 51:
        print(f"❌ Expected 51 unique ids, got {len(set(ids))} of {len(ids)}")
        return 1
    print(f"✅ {len(ids)} items, all ids unique")

    print("\n[6/6] Removing member with cascade...")
    board.integrity.remove_member(ana.member_id)
    dangling = board.integrity.dangling_assignments()
    if dangling or board.store.get_item(item.item_id).assigned_to is not None:
        print(f"❌ Dangling assignments: {[i.item_id for i in dangling]}")
        return 1
    print(f"✅ No dangling assignments. Stats: {board.queries.board_stats()}")

    print("\n" + "=" * 60)
    print("✅ ALL CHECKS PASSED")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
