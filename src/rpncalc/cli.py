from os import isatty
from sys import stdin, stdout, stderr, exit
from argparse import ArgumentParser, ArgumentTypeError, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession

from .util import RPNError
from .machine import Machine
from .lexer import Lexer
from .stack import STACK_MAX


logger = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    # Not persistent; neither is the stack.
                                    history=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


def _capacity(text):
    '''
    argparse type for stack capacities.
    '''
    try:
        capacity = int(text)
    except ValueError:
        raise ArgumentTypeError('invalid capacity {!r}'.format(text))
    if capacity < 1:
        raise ArgumentTypeError('capacity must be at least 1')
    return capacity


class CLI:
    '''
    Command line interface to RPN calculator.
    '''

    DEFAULT_PROMPT = 'rpn> '

    def dumper(self):
        '''
        Dump every token with its category.
        '''
        machine = Machine(capacity=self.args.capacity)
        print('<repr(token)>\t<category>')
        for line in self.args.expressions:
            for token in machine.lexer.lex(line):
                print(repr(token), machine.classify(token), sep='\t')

    def executor(self):
        '''
        Run machine (RPN calculator) until quit or end of input.
        '''
        machine = Machine(capacity=self.args.capacity)
        if self.banner:
            machine.help()
        for line in self.args.expressions:
            for token in machine.lexer.lex(line):
                # One bad token doesn't spoil the rest of the line.
                try:
                    machine.feed(token)
                except RPNError as e:
                    logger.debug('Failed on %r', token, exc_info=True)
                    print(e.args[0])
                if not machine.running:
                    return

    def raw_grammar(self):
        '''
        Print current internally defined number grammar.
        '''
        print(Lexer.NUMBER)

    def _prompting_input(self):
        '''
        Return prompting stdin replacement if either:

        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-q', '--quiet',
                                          action='store_true',
                                          help="don't print help on start")
        self.argument_parser.add_argument('-c', '--capacity',
                                          type=_capacity,
                                          default=STACK_MAX,
                                          help='stack capacity '
                                               '(default: %(default)s)')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(level=logging.DEBUG if self.args.verbose
                            else logging.WARNING,
                            stream=stderr,
                            format='%(name)s: %(message)s')
        # No banner when evaluating expressions given on the command line.
        self.banner = self.args.expressions is stdin and not self.args.quiet
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)


def main():
    cli = CLI()
    cli.run()
