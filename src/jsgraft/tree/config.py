"""
Configuration for tree editing.

Contains the defaults used by wrapped nodes when they print, render
templates and re-parse snippets.
"""

GRAFT_CONFIG = {
    # No terminator on the last statement of a program or block
    "default_deparse_options": {
        "format": {
            "semicolons": False,
        },
    },
    "template_slot": "node",
    "template_cache_size": 128,
    # Block snippets are parsed as the body of this declaration
    "block_wrapper": "function container() {\n${code}\n}",
    # Fields holding statement lists (Program/BlockStatement body, SwitchCase consequent)
    "statement_list_fields": ("body", "consequent"),
}
