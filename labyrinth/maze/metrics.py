from typing import Dict


def init_metrics() -> Dict[str, int | float | dict]:
    return {
        'cells': 0,
        'tree_edges': 0,
        'loop_edges': 0,
        'edges_reduced': 0,
        'cells_carved': 0,
        'regions_filled': 0,
        'cells_filled_regions': 0,
        'dead_end_sweeps': 0,
        'dead_ends_filled': 0,
        'columns_placed': 0,
        'walls': 0,
        'tiles': 0,
        'tubes': 0,
        'runtime_ms': 0.0,
        'phase_ms': {},
    }
