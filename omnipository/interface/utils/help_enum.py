
class HelpEnum():
    """
        Has two states: 'SHOWN', 'HIDDEN'.
        Use toggle() to switch between them.
    """
    def __init__(self, shown=True):

        self.state_dict = {0:'SHOWN', 1:'HIDDEN'}
        self._state = 0 if shown else 1

    def toggle(self):
        self._state = (self._state + 1) % 2

    @property
    def visible(self):
        return self.state == 'SHOWN'

    @property
    def state(self):
        return self.state_dict[self._state]
