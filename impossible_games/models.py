GAME_IDS = (
    'ticTacToe',
    'numberGuessing',
    'reactionTest',
    'rockPaperScissors',
    'memory',
    'mathQuiz',
    'snake',
    'wordGuessing',
    'colorMemory',
)

GAME_TITLES = {
    'ticTacToe': 'Tic-Tac-Toe',
    'numberGuessing': 'Number Guessing',
    'reactionTest': 'Reaction Test',
    'rockPaperScissors': 'Rock Paper Scissors',
    'memory': 'Memory Game',
    'mathQuiz': 'Math Quiz',
    'snake': 'Snake Game',
    'wordGuessing': 'Word Guessing',
    'colorMemory': 'Color Memory',
}

OUTCOMES = {'win': 'wins', 'loss': 'losses'}


def new_game_stats():
    return {'wins': 0, 'losses': 0}


def new_user_record():
    """Fresh record with every game present at zero"""
    return {'games': {game_id: new_game_stats() for game_id in GAME_IDS}}


def complete_user_record(record):
    """
    Fill in any game entries missing from a record read off disk.

    Args:
        record (dict): Record as loaded from the aggregate file

    Returns:
        dict: The same record with all nine games present
    """
    if not isinstance(record, dict):
        record = {}
    games = record.get('games')
    if not isinstance(games, dict):
        games = record['games'] = {}
    for game_id in GAME_IDS:
        stats = games.get(game_id)
        if not isinstance(stats, dict):
            stats = games[game_id] = new_game_stats()
        for counter in ('wins', 'losses'):
            value = stats.get(counter)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                stats[counter] = 0
    return record
