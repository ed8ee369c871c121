import os
from labsnake.levels import LEVEL_CONFIGS, build_level, default_catalog
from labsnake.mapgen.generator import generate_grid

GOLDEN_DIR = os.path.join(os.path.dirname(__file__), "..", "data", "golden_levels")

def read_tsv(path):
    rows = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\r\n")
            if not line:
                continue
            rows.append([int(x) for x in line.split("\t")])
    return rows

def test_catalog_grids_match_goldens():
    for lvl in default_catalog():
        want = read_tsv(os.path.join(GOLDEN_DIR, f"{lvl.id:02d}.tsv"))
        assert lvl.grid.as_matrix() == want, f"Mismatch at level {lvl.id}"

def test_catalog_budgets_match_goldens():
    rows = read_tsv(os.path.join(GOLDEN_DIR, "summary.tsv"))
    assert len(rows) == len(default_catalog())
    for level_id, shortest, max_moves in rows:
        lvl = default_catalog()[level_id - 1]
        assert (lvl.shortest, lvl.max_moves) == (shortest, max_moves), f"Budget mismatch at level {level_id}"

def test_first_level_by_hand():
    cfg = LEVEL_CONFIGS[0]
    got = generate_grid(cfg.logical_w, cfg.logical_h, cfg.seed)
    assert got.to_text() == "\n".join([
        "###########",
        "#...#.....#",
        "###.###.#.#",
        "#.#.....#.#",
        "#.#######.#",
        "#.....#...#",
        "#.#####.###",
        "#.....#.#.#",
        "#.###.#.#.#",
        "#...#.....#",
        "###########",
    ])
    lvl = build_level(1, cfg)
    assert (lvl.shortest, lvl.max_moves) == (24, 39)
