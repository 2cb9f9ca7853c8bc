"""
Central Signal Registry for Event-Driven Architecture.

Uses Flask's built-in blinker integration to enable decoupled
communication between modules.

Usage:
    # Publisher (sender)
    from bookshelf_app.core.signals import book_finished
    book_finished.send('book_service', user_id=1, book_id=2, ...)

    # Subscriber (receiver)
    @book_finished.connect
    def on_book_finished(sender, **kwargs):
        ...
"""
from blinker import Namespace

# ============================================
# Shelf Signals
# ============================================
shelf_signals = Namespace()

# Signal: Fired when a book lands on the read shelf with a finish date
# Payload: user_id, book_id, date_finished, number_of_pages
book_finished = shelf_signals.signal('book_finished')

# ============================================
# Goal Signals
# ============================================
goal_signals = Namespace()

# Signal: Fired the first time the yearly target is reached
# Payload: user_id, goal_id, goal_type, target, read
reading_goal_reached = goal_signals.signal('reading_goal_reached')
