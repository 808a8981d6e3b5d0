from markupsafe import escape

NAME_SECTION_ACTIVE = '<div class="name-section active">'
NAME_SECTION_INACTIVE = '<div class="name-section">'
GAME_SELECTION_INACTIVE = '<div class="game-selection">'
GAME_SELECTION_ACTIVE = '<div class="game-selection active">'
DISPLAY_NAME_PLACEHOLDER = '<span id="displayName"></span>'
BODY_TAG = '<body>'


def show_game_selection(html, display_name):
    """
    Rewrite the main page for a returning user: hide the name entry,
    show the game selection and fill in the display name.

    Only the first occurrence of each marker is replaced.
    """
    html = html.replace(NAME_SECTION_ACTIVE, NAME_SECTION_INACTIVE, 1)
    html = html.replace(GAME_SELECTION_INACTIVE, GAME_SELECTION_ACTIVE, 1)
    return html.replace(
        DISPLAY_NAME_PLACEHOLDER,
        f'<span id="displayName">{escape(display_name)}</span>', 1)


def inject_user(html, user):
    """Tag the opening body tag with a data-user attribute"""
    return html.replace(BODY_TAG, f'<body data-user="{escape(user)}">', 1)
