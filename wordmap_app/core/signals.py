"""
Central Signal Registry.

Uses Flask's blinker integration so that modules can react to each other
without importing one another.

Usage:
    # Publisher (sender)
    from wordmap_app.core.signals import center_changed
    center_changed.send(None, user_id=1, center='casa')

    # Subscriber (receiver)
    @center_changed.connect
    def on_center_changed(sender, **kwargs):
        ...
"""
from blinker import Namespace

# ============================================
# Mind map signals
# ============================================
mindmap_signals = Namespace()

# Signal: Fired when the resolved mind map center changes
# Payload: user_id, center (str or None), previous (str or None), mode (str)
center_changed = mindmap_signals.signal('center_changed')

# Signal: Fired when the hovered node changes
# Payload: user_id, node_id (str or None)
hover_changed = mindmap_signals.signal('hover_changed')

# ============================================
# Vocabulary signals
# ============================================
vocabulary_signals = Namespace()

# Signal: Fired when two words are linked or unlinked
# Payload: user_id, word_a_id, word_b_id, linked (bool)
words_linked = vocabulary_signals.signal('words_linked')

# Signal: Fired when a word confidence level changes after a flashcard answer
# Payload: user_id, word_id, confidence
word_progress_updated = vocabulary_signals.signal('word_progress_updated')

# ============================================
# Auth signals
# ============================================
auth_signals = Namespace()

# Signal: Fired after a new account is created
# Payload: user
user_registered = auth_signals.signal('user_registered')

# Signal: Fired when a password reset code is issued
# Payload: email, code, expires_at
reset_code_issued = auth_signals.signal('reset_code_issued')
