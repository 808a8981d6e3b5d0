import copy
import logging
from impossible_games.models import (GAME_IDS, OUTCOMES, new_user_record,
                                     complete_user_record)
from impossible_games.utils.persistence import (load_users, save_users,
                                                save_user_results,
                                                ensure_results_dir)

# Set up logging
logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Base class for rejected store operations"""
    message = 'Invalid request'

    def __init__(self):
        super().__init__(self.message)


class UserNotFound(StoreError):
    message = 'User not found'


class GameNotFound(StoreError):
    message = 'Game not found'


class InvalidOutcome(StoreError):
    message = 'Invalid result'


class RecordStore:
    """
    In-memory name -> record mapping backed by the aggregate users file
    and one results file per user.

    Every mutation is flushed synchronously to both files. Write failures
    are logged by the persistence helpers and never undo the in-memory change.
    """

    def __init__(self, users_file, results_dir, users=None):
        self.users_file = users_file
        self.results_dir = results_dir
        self._users = users if users is not None else {}

    @classmethod
    def from_file(cls, users_file, results_dir):
        """Build the store from the aggregate file and make sure the results dir exists"""
        users = {
            name: complete_user_record(record)
            for name, record in load_users(users_file).items()
        }
        ensure_results_dir(results_dir)
        return cls(users_file, results_dir, users)

    def __len__(self):
        return len(self._users)

    def names(self):
        return list(self._users)

    def create(self, name):
        """
        Add a user with every game at zero.

        Args:
            name (str): Already trimmed, non-empty user name

        Returns:
            bool: True if the user was created, False if it already existed
        """
        if name in self._users:
            return False

        self._users[name] = new_user_record()
        logger.info(f"Created new user: {name}")
        self._persist(name)
        return True

    def exists(self, name):
        return name in self._users

    def get_all(self):
        """Snapshot of the whole store; later mutations are not reflected"""
        return copy.deepcopy(self._users)

    def get(self, name):
        record = self._users.get(name)
        return copy.deepcopy(record) if record is not None else None

    def record_result(self, name, game_id, outcome):
        """
        Count one win or loss for a user's game.

        Raises:
            UserNotFound: unknown user
            GameNotFound: game_id is not one of the known games
            InvalidOutcome: outcome is neither 'win' nor 'loss'
        """
        record = self._users.get(name) if isinstance(name, str) else None
        if record is None:
            raise UserNotFound()

        if game_id not in GAME_IDS or game_id not in record['games']:
            raise GameNotFound()

        counter = OUTCOMES.get(outcome) if isinstance(outcome, str) else None
        if counter is None:
            raise InvalidOutcome()

        record['games'][game_id][counter] += 1
        logger.info(f"Recorded {outcome} for {name} in {game_id}")
        self._persist(name)

    def flush(self):
        """Write the aggregate file; used on shutdown"""
        return save_users(self.users_file, self._users)

    def flush_all(self):
        """Write the aggregate file and every per-user file"""
        ok = self.flush()
        for name, record in self._users.items():
            ok = save_user_results(self.results_dir, name, record) and ok
        return ok

    def _persist(self, name):
        save_users(self.users_file, self._users)
        save_user_results(self.results_dir, name, self._users[name])
