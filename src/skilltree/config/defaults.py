"""
skilltree.config.defaults - Default document values and rendering constants.
"""

DEFAULT_STATUS = "Unassigned"

# Header row of every group table unless the group sets header_color
DEFAULT_HEADER_COLOR = "darkgoldenrod"

# Fill for goal notes
GOAL_FILL_COLOR = "darkgoldenrod"

STATUS_BGCOLOR = "cornsilk"

WATCH_EMOJI = "\u231a"
HAMMER_WRENCH_EMOJI = "\U0001f6e0\ufe0f"
CHECKED_BOX_EMOJI = "\u2611\ufe0f"
RAISED_HAND_EMOJI = "\U0001f64b"

TREE_FILE_NAME = "skill-tree.toml"

# Plain-data form of the built-in status table; user documents are merged
# over this, one status entry at a time.
DEFAULT_DOCUMENT = {
    "status": {
        # Can't work on it now
        "Blocked": {
            "emoji": WATCH_EMOJI,
            "bgcolor": STATUS_BGCOLOR,
            "start_tag": '<i><font color="lightgrey">',
            "end_tag": "</font></i>",
        },
        # Would like to work on it, but need someone
        "Unassigned": {
            "emoji": RAISED_HAND_EMOJI,
            "bgcolor": STATUS_BGCOLOR,
            "fontcolor": "red",
        },
        # People are actively working on it
        "Assigned": {
            "emoji": HAMMER_WRENCH_EMOJI,
            "bgcolor": STATUS_BGCOLOR,
        },
        # This is done!
        "Complete": {
            "emoji": CHECKED_BOX_EMOJI,
            "bgcolor": STATUS_BGCOLOR,
            "start_tag": "<s>",
            "end_tag": "</s>",
        },
    },
    "default_status": DEFAULT_STATUS,
}
