from typing import Any, Dict


def init_metrics() -> Dict[str, Any]:
    return {
        'room_attempts': 0,
        'rooms_placed': 0,
        'maze_regions': 0,
        'corridor_cells_carved': 0,
        'connectors_found': 0,
        'doors_created': 0,
        'extra_doors': 0,
        'dead_ends_pruned': 0,
        'snapshots_emitted': 0,
        'runtime_ms': 0.0,
        'phase_ms': {},
    }
