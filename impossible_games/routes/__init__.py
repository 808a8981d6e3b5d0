from flask import current_app


def get_store():
    """The RecordStore owned by the running app"""
    return current_app.extensions['record_store']
