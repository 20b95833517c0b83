import logging
import re
from html import escape

import markdown
from latex2mathml.converter import convert as latex_to_mathml
from markdown.extensions import Extension
from markdown.inlinepatterns import InlineProcessor
from markdown.preprocessors import Preprocessor
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from blog.errors import MathRenderError

logger = logging.getLogger(__name__)

FENCED_BLOCK_RE = re.compile(
    r"(?P<fence>^(?:~{3,}|`{3,}))[ ]*(?P<lang>[\w#.+-]*)[ ]*\n"
    r"(?P<code>.*?)(?<=\n)(?P=fence)[ ]*$",
    re.MULTILINE | re.DOTALL,
)
# Code spans are matched first so `$$` inside backticks is left alone.
# A span never crosses a blank line, so a stray backtick can't swallow math.
BLOCK_MATH_RE = re.compile(
    r"(?P<span>(`+)(?:(?!\n[ \t]*\n).)+?\2)|\$\$(?P<math>.+?)\$\$", re.DOTALL
)
INLINE_MATH_RE = r"(?<![\\$])\$(?![$\s])(?P<math>[^\n$]+?)(?<![\\\s])\$(?!\$)"

MARKDOWN_EXTENSIONS = ["tables", "sane_lists"]

_formatter = HtmlFormatter(cssclass="highlight", wrapcode=True)


def render_math(latex: str, display: bool = False) -> str:
    """Render a LaTeX expression to MathML, logging and re-raising on failure."""
    try:
        return latex_to_mathml(latex.strip(), display="block" if display else "inline")
    except Exception as e:
        logger.error(f"Failed to render math expression: {latex}")
        raise MathRenderError(latex, str(e) or type(e).__name__) from e


def format_math_block(latex: str) -> str:
    return f'<div class="math-display">{render_math(latex, display=True)}</div>'


def highlight_code(code: str, language: str) -> str:
    """
    Highlight a fenced code block with Pygments.

    Unknown or missing languages, and any highlighter failure, fall back to
    escaped plain text.
    """
    code = code.rstrip("\n")
    if language:
        try:
            lexer = get_lexer_by_name(language)
            return highlight(code, lexer, _formatter).rstrip("\n")
        except ClassNotFound:
            logger.debug(f"No lexer for language {language!r}, rendering plain")
        except Exception as e:
            logger.warning(f"Failed to highlight {language} code: {e}")
    return format_plain_code(code, language)


def format_plain_code(code: str, language: str = "") -> str:
    class_attr = f' class="language-{escape(language)}"' if language else ""
    return f"<pre><code{class_attr}>{escape(code)}</code></pre>"


class HighlightedFencePreprocessor(Preprocessor):
    def run(self, lines):
        text = "\n".join(lines)
        text = FENCED_BLOCK_RE.sub(self._replace, text)
        return text.split("\n")

    def _replace(self, match: re.Match) -> str:
        html = highlight_code(match.group("code"), match.group("lang"))
        return "\n\n" + self.md.htmlStash.store(html) + "\n\n"


class BlockMathPreprocessor(Preprocessor):
    def run(self, lines):
        text = "\n".join(lines)
        text = BLOCK_MATH_RE.sub(self._replace, text)
        return text.split("\n")

    def _replace(self, match: re.Match) -> str:
        if match.group("math") is None:
            return match.group(0)
        html = format_math_block(match.group("math"))
        return "\n\n" + self.md.htmlStash.store(html) + "\n\n"


class InlineMathProcessor(InlineProcessor):
    def handleMatch(self, m, data):
        html = render_math(m.group("math"))
        return self.md.htmlStash.store(html), m.start(0), m.end(0)


class BlogMarkdownExtension(Extension):
    """Fenced code highlighting plus `$$block$$` and `$inline$` math."""

    def extendMarkdown(self, md):
        # after normalize_whitespace (30), before html_block (20)
        md.preprocessors.register(HighlightedFencePreprocessor(md), "blog_fenced_code", 25)
        md.preprocessors.register(BlockMathPreprocessor(md), "blog_block_math", 22)
        # after backticks (190) so code spans keep their dollars
        md.inlinePatterns.register(InlineMathProcessor(INLINE_MATH_RE, md), "blog_inline_math", 185)


def build_markdown() -> markdown.Markdown:
    return markdown.Markdown(extensions=[BlogMarkdownExtension(), *MARKDOWN_EXTENSIONS])


def render_markdown(text: str) -> str:
    """Render a post body (math, highlighted code, markdown) to HTML."""
    # Markdown instances keep per-document state, so each render gets its own
    return build_markdown().convert(text)
