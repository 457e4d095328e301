"""checksync: checklist text <-> structured items, with derived progress.

Public API re-exports for convenient imports:
    from checksync import parse, serialize, is_checklist, derive, ...
"""

# Models
from checksync.models import (
    TaskStatus,
    ChecklistItem,
    ChecklistDocument,
    ProgressState,
)

# Parsing
from checksync.checklist import (
    MARKERS,
    is_checklist,
    looks_like_checklist,
    parse,
    parse_line,
    serialize,
    split_lines,
    to_checklist,
    to_plain,
)

# Progress
from checksync.progress import (
    ChecklistConstraint,
    apply,
    derive,
    status_for_percent,
)

# Fields
from checksync.fields import (
    IntegerField,
    StatusField,
    TextField,
)

# Editing
from checksync.editor import (
    ChecklistEditor,
    EditorRow,
)

# Config
from checksync.config import (
    SyncConfig,
    build_constraint,
    build_text_field,
    config_path,
    load_config,
    validate_config,
)
