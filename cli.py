"""cli.py

Interactive command-line interface for the two bid programs.

Program flow when you run `python main.py table` (hash table program):
  1) Start with an empty BidHashTable (179 buckets unless --table-size is given).
  2) Menu: load the CSV into the table, print every bid, find or remove a bid by ID.

Program flow when you run `python main.py sort` (sorting program):
  1) Start with an empty list of bids.
  2) Menu: load the CSV into the list, print it, sort it by title with
     selection sort or quicksort.

Every timed action reports its elapsed time in clock ticks and seconds.

Note:
- The CLI is intentionally small; most logic lives in data_loader.py, hash_table.py, and sorting.py.
"""

from __future__ import annotations

import argparse
import logging
import os
from typing import List, Optional

from data_loader import load_bids_csv, load_bids_into
from hash_table import DEFAULT_SIZE, BidHashTable
from models import Bid
from sorting import quick_sort, selection_sort
from util import Stopwatch, format_bid, report_elapsed

logger = logging.getLogger(__name__)

DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')
DEFAULT_CSV = os.path.join(DATA_DIR, 'eBid_Monthly_Sales.csv')
DEFAULT_BID_KEY = '98223'

EXIT_CHOICE = 9


def read_choice() -> Optional[int]:
    """Prompt for a menu number. Returns None on end of input, -1 if not a number."""
    try:
        raw = input('Enter choice: ')
    except EOFError:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return -1


def prompt_bid_id(default: str) -> str:
    """Ask for a bid ID; a blank answer keeps `default`."""
    try:
        raw = input(f'Enter Bid Id [{default}]: ').strip()
    except EOFError:
        return default
    return raw or default


def print_header(header: List[str]) -> None:
    print(' | '.join(header) + ' | ')


# -------------------------
# Hash table program
# -------------------------

def run_hash_table_menu(csv_path: str, bid_key: str, table_size: int = DEFAULT_SIZE) -> BidHashTable:
    """Menu loop for the hash table program. Returns the table when the user exits."""
    table = BidHashTable(table_size)

    while True:
        print('Menu:')
        print('  1. Load Bids')
        print('  2. Display All Bids')
        print('  3. Find Bid')
        print('  4. Remove Bid')
        print('  9. Exit')
        choice = read_choice()

        if choice is None or choice == EXIT_CHOICE:
            break

        if choice == 1:
            print(f'Loading CSV file {csv_path}')
            try:
                with Stopwatch() as watch:
                    header, count = load_bids_into(csv_path, table)
            except (OSError, ValueError) as e:
                print(f'Could not load {csv_path}: {e}')
                continue
            print_header(header)
            print(f'{count} bids read')
            report_elapsed(watch)

        elif choice == 2:
            table.print_all()

        elif choice == 3:
            bid_id = prompt_bid_id(bid_key)
            with Stopwatch() as watch:
                bid = table.search(bid_id)
            if bid is not None:
                print(format_bid(bid))
            else:
                print(f'Bid Id {bid_id} not found.')
            report_elapsed(watch)

        elif choice == 4:
            bid_id = prompt_bid_id(bid_key)
            with Stopwatch() as watch:
                removed = table.remove(bid_id)
            if removed:
                print(f'Bid Id {bid_id} removed.')
            else:
                print(f'Bid Id {bid_id} not found.')
            report_elapsed(watch)

        else:
            print('Invalid option.')

    print('Good bye.')
    return table


# -------------------------
# Sorting program
# -------------------------

def run_sorting_menu(csv_path: str) -> List[Bid]:
    """Menu loop for the sorting program. Returns the bid list when the user exits."""
    bids: List[Bid] = []

    while True:
        print('Menu:')
        print('  1. Load Bids')
        print('  2. Display All Bids')
        print('  3. Selection Sort All Bids')
        print('  4. Quick Sort All Bids')
        print('  9. Exit')
        choice = read_choice()

        if choice is None or choice == EXIT_CHOICE:
            break

        if choice == 1:
            print(f'Loading CSV file {csv_path}')
            try:
                with Stopwatch() as watch:
                    header, bids = load_bids_csv(csv_path)
            except (OSError, ValueError) as e:
                print(f'Could not load {csv_path}: {e}')
                continue
            print_header(header)
            print(f'{len(bids)} bids read')
            report_elapsed(watch)

        elif choice == 2:
            for bid in bids:
                print(format_bid(bid))
            print()

        elif choice == 3:
            with Stopwatch() as watch:
                selection_sort(bids)
            print(f'Selection Sort completed in {watch.ticks} clock ticks')
            print(f'Time: {watch.seconds} seconds')

        elif choice == 4:
            with Stopwatch() as watch:
                quick_sort(bids)
            print(f'Quick Sort completed in {watch.ticks} clock ticks')
            print(f'Time: {watch.seconds} seconds')

        else:
            print('Invalid option.')

    print('Good bye.')
    return bids


# -------------------------
# Entry point
# -------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='bids', description='eBid hash table and sorting demos.')
    parser.add_argument('-v', '--verbose', action='store_true', help='log debug messages')
    sub = parser.add_subparsers(dest='program', required=True)

    table = sub.add_parser('table', help='chaining hash table: load, display, find, remove')
    table.add_argument('csv_path', nargs='?', default=DEFAULT_CSV)
    table.add_argument('bid_key', nargs='?', default=DEFAULT_BID_KEY,
                       help='bid ID offered by the find/remove prompts')
    table.add_argument('--table-size', type=int, default=DEFAULT_SIZE, help='number of buckets')

    sort = sub.add_parser('sort', help='selection sort and quicksort by title')
    sort.add_argument('csv_path', nargs='?', default=DEFAULT_CSV)
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    if args.program == 'table':
        if args.table_size < 1:
            print('--table-size must be at least 1')
            return 2
        logger.debug('Hash table program: %s, key %s, %d buckets',
                     args.csv_path, args.bid_key, args.table_size)
        run_hash_table_menu(args.csv_path, args.bid_key, args.table_size)
    else:
        logger.debug('Sorting program: %s', args.csv_path)
        run_sorting_menu(args.csv_path)
    return 0
