from typing import Optional, TextIO


class DebugLog:
    """Verbosity-gated trace output shared by the parser and interpreter.

    Nothing is written at level 0. Above that, lines go to ``stream`` when
    one is given, otherwise to ``debug_file`` which is opened on the first
    trace and truncated.
    """
    def __init__(self, level: int = 0, debug_file: str = 'debug.txt', stream: Optional[TextIO] = None):
        self.level = level
        self.debug_file = debug_file
        self.fp = stream
        self._owns_fp = False

    def __call__(self, msg: str, level: int = 1):
        if self.level < level:
            return
        if self.fp is None:
            self.fp = open(self.debug_file, 'w', encoding='utf-8')
            self._owns_fp = True
        self.fp.write(msg + '\n')
        self.fp.flush()

    def close(self):
        if self._owns_fp and self.fp:
            self.fp.close()
            self.fp = None
            self._owns_fp = False
