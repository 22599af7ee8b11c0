"""
Central Signal Registry for Event-Driven Architecture.

Uses blinker so the Learning module can report results without importing
the Stats module.

Usage:
    # Publisher (sender)
    from scenelingo_app.core.signals import session_completed
    session_completed.send(None, scene_id='subway', points=50, words=5)

    # Subscriber (receiver) - in module's events.py
    @session_completed.connect
    def on_session_completed(sender, **kwargs):
        ...
"""
from blinker import Namespace

learning_signals = Namespace()

# Signal: Fired when a learning session is finished and the reward collected
# Payload: scene_id (str), points (int), words (int)
session_completed = learning_signals.signal('session_completed')

# ============================================
# Stats Signals
# ============================================
stats_signals = Namespace()

# Signal: Fired after the stats record has been persisted
# Payload: stats (UserStats), reason (str: 'load', 'check_in', 'completion')
stats_updated = stats_signals.signal('stats_updated')

# Signal: Fired when the daily bonus button is pressed
# Payload: outcome (CheckInOutcome), stats (UserStats)
checked_in = stats_signals.signal('checked_in')
