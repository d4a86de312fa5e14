"""Services for Canvas Compositor"""

from .panorama_group_service import (
    PORTRAIT,
    LANDSCAPE,
    create_default_group,
    reorder_canvas_ids,
    insert_canvas_id_in_order,
    toggle_canvas,
    remove_canvas,
    get_canvas_dimensions,
    get_recommended_image_dimensions,
    PanoramaGroupService,
)

__all__ = [
    'PORTRAIT',
    'LANDSCAPE',
    'create_default_group',
    'reorder_canvas_ids',
    'insert_canvas_id_in_order',
    'toggle_canvas',
    'remove_canvas',
    'get_canvas_dimensions',
    'get_recommended_image_dimensions',
    'PanoramaGroupService',
]
