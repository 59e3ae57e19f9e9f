import os
import json
import random
from datetime import datetime
import numpy as np
from alias_table import AliasTable
from random_sources import as_random_source

DEMO_PAIRS = [('a', 1.0), ('b', 1.0), ('c', 0.5), ('d', 0.0)]


def get_logger(log_file_path, run_id=None, print_to_console=True):
    """
    Returns a logger that appends draw records to file as JSON, 1 per line.

    Args:
        log_file_path (str): File to append records to. Its directory is
            created if missing.
        run_id (str): Stamped on every record so that several runs can
            share one file. Omitted from records if None.
        print_to_console (bool): If True, also prints records to stdout.

    Returns:
        log_fn (callable): log_fn(record: dict)
    """
    log_dir = os.path.dirname(log_file_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    def log_fn(record):
        record = dict(record)
        if run_id is not None:
            record["run_id"] = run_id
        record["timestamp"] = datetime.now().isoformat()
        line = json.dumps(record)
        with open(log_file_path, "a") as f:
            f.write(line + "\n")
        if print_to_console:
            print(line)

    return log_fn


def simulate_draws(table, num_draws, rng=None):
    """Draws num_draws slots from table and counts them.

    Counting is by slot, so items need not be hashable and an item stored
    in several slots gets one count per slot.

    Args:
        table (AliasTable): Table to draw from.
        num_draws (int): Number of draws.
        rng: random.Random, numpy.random.Generator or anything else
            as_random_source() accepts. A fresh random.Random is used if None.

    Returns:
        np.ndarray: int64 array of length len(table), draws per slot.
    """
    if num_draws < 0:
        raise ValueError(f"num_draws must be non-negative. Got {num_draws}.")
    rng = as_random_source(random.Random() if rng is None else rng)
    slots = [table.sample_index(rng) for _ in range(num_draws)]
    return np.bincount(
        np.asarray(slots, dtype=np.intp), minlength=len(table)
        ).astype(np.int64)


def empirical_frequencies(counts):
    """Relative frequency per slot for counts from simulate_draws().
    All zeros when nothing was drawn.
    """
    counts = np.asarray(counts, dtype=np.float64)
    total = counts.sum()
    if total == 0:
        return counts
    return counts / total


def run_demo(num_draws=10, seed=None, log_file_path=None):
    """Builds a small loaded die and prints num_draws rolls of it."""
    table = AliasTable(DEMO_PAIRS)
    rng = random.Random(seed)
    draws = []
    for _ in range(num_draws):
        item = table.sample(rng)
        print(item)
        draws.append(item)

    if log_file_path is not None:
        run_id = datetime.now().strftime("%Y%m%d_%H%M%S")
        logger = get_logger(log_file_path, run_id=run_id,
                            print_to_console=False)
        logger({
            "num_draws": num_draws,
            "seed": seed,
            "counts": {item: draws.count(item) for item in table.items},
        })
    return draws


if __name__ == "__main__":
    run_demo()
