from flask import Blueprint, current_app, request, send_file, send_from_directory
from werkzeug.security import safe_join
import logging
import os
from impossible_games.routes import get_store
from impossible_games.utils.templating import show_game_selection, inject_user

# Set up logging
logger = logging.getLogger(__name__)

bp = Blueprint('main', __name__)


def find_game_page(game):
    """Path of games/<game>.html, or None if there is no such page"""
    game_path = safe_join(current_app.config['GAMES_DIR'], f"{game}.html")
    if game_path and os.path.isfile(game_path):
        return game_path
    return None


def read_page(path):
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


@bp.route('/', strict_slashes=True)
def index():
    """Main page, skipping name entry for a known ?user="""
    html = read_page(os.path.join(current_app.config['PUBLIC_DIR'], 'index.html'))

    user_param = request.args.get('user')
    if user_param and get_store().exists(user_param):
        logger.debug(f"Serving main page for returning user {user_param}")
        html = show_game_selection(html, user_param)

    return html


@bp.route('/games/<game>')
def game_page(game):
    """A file from the games dir by its own name, else games/<game>.html"""
    games_dir = current_app.config['GAMES_DIR']
    asset_path = safe_join(games_dir, game)
    if asset_path and os.path.isfile(asset_path):
        return send_from_directory(games_dir, game)

    game_path = find_game_page(game)
    if not game_path:
        return 'Game not found', 404
    return send_file(game_path)


@bp.route('/play/<game>', defaults={'user': None})
@bp.route('/play/<game>/<user>')
def play(game, user):
    """Game page with the player's name carried on the body tag"""
    game_path = find_game_page(game)
    if not game_path:
        return 'Game not found', 404

    html = read_page(game_path)
    if user:
        html = inject_user(html, user)
    return html
