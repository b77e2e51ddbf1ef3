"""
Prompt input for medai_prompt.
Provides prompt_toolkit input with slash-command completion and a status toolbar.
"""

from typing import Callable, Dict, Iterable, List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style


PROMPT_STYLE = Style.from_dict({
    'prompt': '#00d7d7 bold',
    'tab': '#6a4c93',
    'theme': '#00d7d7',
    'bottom-toolbar': 'bg:#1a1a1a #666666',
    'completion-menu.completion': 'bg:#262626 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000 bold',
    'completion-menu.meta.completion': 'bg:#262626 #666666',
    'completion-menu.meta.completion.current': 'bg:#00aaaa #000000',
})


ArgumentProvider = Callable[[], List[str]]


class CLICompleter(Completer):
    """
    Completer for slash commands and their arguments.

    The command name is completed after ``/``. After the command name and a
    space, values from the argument provider registered for that command are
    offered (preset ids, chip names, category names, ...).
    """

    def __init__(self) -> None:
        self._commands: List[tuple] = []
        self._argument_providers: Dict[str, ArgumentProvider] = {}

    def set_commands(self, commands: List[dict]) -> None:
        """Set available slash commands."""
        self._commands = [
            (cmd['name'], cmd['description'][:50])
            for cmd in commands
        ]

    def set_argument_provider(self, command: str, provider: ArgumentProvider) -> None:
        """Register a callable returning the argument values for a command."""
        self._argument_providers[command] = provider

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        """Get completions based on current input."""
        text = document.text_before_cursor

        if not text.startswith('/'):
            return

        if ' ' in text:
            yield from self._get_argument_completions(text)
        else:
            yield from self._get_command_completions(text)

    def _get_command_completions(self, text: str) -> Iterable[Completion]:
        """Get slash command completions."""
        query = text[1:].lower()

        for name, desc in self._commands:
            if name.lower().startswith(query):
                yield Completion(
                    f'/{name}',
                    start_position=-len(text),
                    display=f'/{name}',
                    display_meta=desc
                )

    def _get_argument_completions(self, text: str) -> Iterable[Completion]:
        """Complete the argument text after the command name."""
        command, _, arg_text = text[1:].partition(' ')
        provider = self._argument_providers.get(command.lower())
        if provider is None:
            return

        for value in provider():
            if value.startswith(arg_text) and value != arg_text:
                yield Completion(value, start_position=-len(arg_text))


class PromptInput:
    """
    Interactive input handler with prompt_toolkit.

    Features:
    - Dropdown autocomplete for slash commands and their arguments
    - Bottom toolbar showing the active tab and search theme
    - Command history
    """

    def __init__(self, toolbar: Optional[Callable[[], str]] = None) -> None:
        """
        Initialize the PromptInput.

        Args:
            toolbar: Callable returning toolbar HTML markup, called on every
                redraw.
        """
        self._completer = CLICompleter()
        self._history = InMemoryHistory()
        self._session: Optional[PromptSession] = None
        self._toolbar = toolbar

    @property
    def completer(self) -> CLICompleter:
        return self._completer

    def set_commands(self, commands: List[dict]) -> None:
        """Set available slash commands."""
        self._completer.set_commands(commands)

    def _get_toolbar(self) -> HTML:
        return HTML(self._toolbar() if self._toolbar else '')

    def _create_session(self) -> PromptSession:
        """Create a new prompt session."""
        return PromptSession(
            completer=self._completer,
            complete_while_typing=True,
            history=self._history,
            style=PROMPT_STYLE,
            bottom_toolbar=self._get_toolbar,
            mouse_support=False,
            reserve_space_for_menu=8,
        )

    def get_input(self, prompt: str = '> ') -> str:
        """
        Get input with interactive autocomplete.

        Args:
            prompt: Prompt string to display

        Returns:
            User input string; ``/quit`` on end of input, empty on Ctrl-C
        """
        if self._session is None:
            self._session = self._create_session()

        try:
            return self._session.prompt(HTML(f'<prompt>{prompt}</prompt>'))
        except EOFError:
            return '/quit'
        except KeyboardInterrupt:
            return ''
