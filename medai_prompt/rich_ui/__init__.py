"""Rich UI components for medai_prompt."""
from .renderer import RichRenderer
from .prompt_input import CLICompleter, PromptInput, PROMPT_STYLE

__all__ = [
    'RichRenderer',
    'CLICompleter', 'PromptInput', 'PROMPT_STYLE',
]
