from .model import AxisCandidate, Dimension, ModelConsistencyError, Option, OptionStatus, new_id
from .config import ScoringConfig, get_scoring_config, set_scoring_config
from .geometry import (
    MapFrame,
    Point,
    clamp01,
    from_canvas,
    make_default_polygon,
    point_in_polygon,
    polygon_path,
    to_canvas,
)
from .intake import (
    AXIS_RULES,
    build_dimensions_from_considerations,
    default_dimensions,
    infer_axis,
    normalize_text,
    parse_considerations,
    split_candidates,
)
from .options import (
    MapPoint,
    OptionTemplate,
    away_from_preference,
    default_scores,
    init_options,
    map_points,
    new_option,
    preference_point,
)
from .scoring import compute_status, composite_score, option_distance, ranked, top_n
from .interaction import (
    IDLE,
    DraggingOption,
    DraggingVertex,
    DragState,
    Idle,
    OptionMoved,
    VertexMoved,
    drag_update,
    press_option,
    press_vertex,
    release,
)
from .session import DecisionMap
from .printer import format_dimension, format_status, print_map, print_ranking
from .svg_codegen import generate_svg_document

__all__ = [
    'AxisCandidate',
    'Dimension',
    'ModelConsistencyError',
    'Option',
    'OptionStatus',
    'new_id',
    'ScoringConfig',
    'get_scoring_config',
    'set_scoring_config',
    'MapFrame',
    'Point',
    'clamp01',
    'from_canvas',
    'make_default_polygon',
    'point_in_polygon',
    'polygon_path',
    'to_canvas',
    'AXIS_RULES',
    'build_dimensions_from_considerations',
    'default_dimensions',
    'infer_axis',
    'normalize_text',
    'parse_considerations',
    'split_candidates',
    'MapPoint',
    'OptionTemplate',
    'away_from_preference',
    'default_scores',
    'init_options',
    'map_points',
    'new_option',
    'preference_point',
    'compute_status',
    'composite_score',
    'option_distance',
    'ranked',
    'top_n',
    'IDLE',
    'DraggingOption',
    'DraggingVertex',
    'DragState',
    'Idle',
    'OptionMoved',
    'VertexMoved',
    'drag_update',
    'press_option',
    'press_vertex',
    'release',
    'DecisionMap',
    'format_dimension',
    'format_status',
    'print_map',
    'print_ranking',
    'generate_svg_document',
]
