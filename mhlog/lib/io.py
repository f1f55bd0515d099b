import sys
from logging import getLogger
from shutil import get_terminal_size

log = getLogger(__name__)


def terminal_width(width=None):
    return get_terminal_size()[0] if width is None else width


class Console:
    '''
    Line-based terminal interaction.

    The streams are injected so that tests can script a session with StringIO.
    '''

    def __init__(self, input=None, output=None):
        self.__in = input or sys.stdin
        self.__out = output or sys.stdout

    @property
    def output(self):
        return self.__out

    def print(self, *text):
        print(*text, file=self.__out)

    def read(self, prompt=None):
        '''
        Read a single line (without the trailing newline), raising EOFError when
        the input is exhausted.
        '''
        if prompt:
            print(prompt, end='', file=self.__out)
            self.__out.flush()
        line = self.__in.readline()
        if not line:
            raise EOFError()
        return line.rstrip('\r\n')

    def retry(self, prompt, parse, error):
        '''
        Prompt until `parse` accepts the input.

        `parse` signals rejection with ValueError; `error` is then displayed (it can be a
        function of the bad input) and the prompt repeats.
        '''
        while True:
            self.print(prompt)
            text = self.read()
            try:
                return parse(text)
            except ValueError as e:
                log.debug(f'Rejected "{text}": {e}')
                self.print(error(text) if callable(error) else error)
