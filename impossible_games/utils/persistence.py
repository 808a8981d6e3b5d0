import hashlib
import json
import logging
import os
from werkzeug.utils import secure_filename

# Set up logging
logger = logging.getLogger(__name__)


def load_users(users_file):
    """
    Read the aggregate file once at startup.

    Args:
        users_file (str): Path to the aggregate JSON file

    Returns:
        dict: name -> record mapping, empty if the file is missing or unreadable
    """
    try:
        if os.path.exists(users_file):
            with open(users_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
            users = data.get('users') if isinstance(data, dict) else None
            if isinstance(users, dict):
                logger.info(f"Loaded {len(users)} users from {users_file}")
                return users
            logger.warning(f"No users mapping in {users_file}, starting fresh")
        else:
            logger.info("No existing users file found, starting fresh")
    except (OSError, ValueError) as e:
        logger.warning(f"Could not read users file {users_file}: {str(e)}")
    return {}


def ensure_results_dir(results_dir):
    os.makedirs(results_dir, exist_ok=True)


def results_filename(name):
    """Filesystem-safe file name for a user's per-user results file"""
    safe_name = secure_filename(name)
    if safe_name != name:
        digest = hashlib.sha1(name.encode('utf-8')).hexdigest()
        # distinct names map to distinct files
        safe_name = f"{safe_name}-{digest[:8]}" if safe_name else digest
    return f"{safe_name}.json"


def save_users(users_file, users):
    """Overwrite the aggregate file with the whole store"""
    try:
        with open(users_file, 'w', encoding='utf-8') as f:
            json.dump({'users': users}, f, indent=2)
        return True
    except (OSError, TypeError, ValueError) as e:
        logger.error(f"Error saving users: {str(e)}", exc_info=True)
        return False


def save_user_results(results_dir, name, record):
    """Overwrite the per-user results file for one user"""
    try:
        user_file = os.path.join(results_dir, results_filename(name))
        with open(user_file, 'w', encoding='utf-8') as f:
            json.dump(record, f, indent=2)
        return True
    except (OSError, TypeError, ValueError) as e:
        logger.error(f"Error saving results for {name!r}: {str(e)}",
                     exc_info=True)
        return False
