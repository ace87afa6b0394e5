"""Markdown to HTML rendering for model output.

Only the subset the generator produces is supported: ``#``-``###`` headers,
bold, italic, ``-`` lists, fenced code, inline code, links and blockquotes.
The whole input is HTML-escaped before any structure is added, so the only
tags in the output are the ones emitted here.
"""

import re
from typing import List

HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#039;",
    }
)

H1_OPEN = '<h1 class="text-xl font-bold mb-3 text-indigo-300">'
H2_OPEN = '<h2 class="text-lg font-bold mb-2 text-indigo-300">'
H3_OPEN = '<h3 class="text-md font-bold mb-2 text-indigo-300">'
STRONG_OPEN = '<strong class="font-bold text-white">'
EM_OPEN = '<em class="italic text-slate-200">'
UL_OPEN = '<ul class="list-disc mb-3">'
LI_OPEN = '<li class="text-slate-300">'
PRE_OPEN = '<pre class="bg-slate-800 p-3 rounded-md overflow-auto my-3"><code class="text-amber-300">'
PRE_CLOSE = "</code></pre>"
P_OPEN = '<p class="mb-2 text-slate-300">'
BLOCKQUOTE_OPEN = '<blockquote class="border-l-4 border-indigo-500 pl-4 italic text-slate-400 my-2">'
CODE_OPEN = '<code class="bg-slate-800 px-1 py-0.5 rounded text-amber-300">'
LINK_CLASS = "text-indigo-400 hover:text-indigo-300 underline"

FENCE = "```"
LIST_MARKER = "- "
# "> " after escaping
QUOTE_MARKER = "&gt; "

_HEADER_RULES = [
    (re.compile(r"^# (.*?)$", re.MULTILINE), H1_OPEN + r"\1</h1>"),
    (re.compile(r"^## (.*?)$", re.MULTILINE), H2_OPEN + r"\1</h2>"),
    (re.compile(r"^### (.*?)$", re.MULTILINE), H3_OPEN + r"\1</h3>"),
]

# Bold before italic so "**x**" is never read as two empty emphasis spans
_EMPHASIS_RULES = [
    (re.compile(r"\*\*(.*?)\*\*"), STRONG_OPEN + r"\1</strong>"),
    (re.compile(r"__(.*?)__"), STRONG_OPEN + r"\1</strong>"),
    (re.compile(r"\*(.*?)\*"), EM_OPEN + r"\1</em>"),
    (re.compile(r"_(.*?)_"), EM_OPEN + r"\1</em>"),
]

_INLINE_CODE = re.compile(r"`([^`]+)`")
_LINK = re.compile(r"\[(.*?)\]\((.*?)\)")
_UNSAFE_SCHEMES = ("javascript:", "vbscript:", "data:")


def escape_html(text: str) -> str:
    """Escape the five HTML metacharacters."""
    return text.translate(HTML_ESCAPES)


def _group_lists(lines: List[str]) -> List[str]:
    result = []
    in_list = False
    for line in lines:
        if line.startswith(LIST_MARKER):
            if not in_list:
                result.append(UL_OPEN)
                in_list = True
            result.append(f"{LI_OPEN}{line[len(LIST_MARKER):]}</li>")
        else:
            if in_list:
                result.append("</ul>")
                in_list = False
            result.append(line)
    if in_list:
        result.append("</ul>")
    return result


def _wrap_blocks(lines: List[str]) -> List[str]:
    result = []
    in_pre = False
    for line in lines:
        if line.startswith("<") and line.endswith(">"):
            result.append(line)
            continue
        if line.startswith(FENCE):
            in_pre = not in_pre
            result.append(PRE_OPEN if in_pre else PRE_CLOSE)
            continue
        if in_pre:
            result.append(line)
            continue
        if line.startswith(QUOTE_MARKER):
            result.append(f"{BLOCKQUOTE_OPEN}{line[len(QUOTE_MARKER):]}</blockquote>")
        elif line.strip() != "":
            result.append(f"{P_OPEN}{line}</p>")
        else:
            result.append(line)
    if in_pre:
        result.append(PRE_CLOSE)
    return result


def _render_link(match: "re.Match[str]") -> str:
    label, url = match.group(1), match.group(2)
    if re.sub(r"\s", "", url).lower().startswith(_UNSAFE_SCHEMES):
        url = "#"
    return f'<a href="{url}" class="{LINK_CLASS}">{label}</a>'


def render_markdown(text: str) -> str:
    """Render ``text`` to an HTML fragment. Empty input gives an empty string."""
    if not text:
        return ""

    formatted = escape_html(text)

    for pattern, replacement in _HEADER_RULES:
        formatted = pattern.sub(replacement, formatted)
    for pattern, replacement in _EMPHASIS_RULES:
        formatted = pattern.sub(replacement, formatted)

    lines = _group_lists(formatted.split("\n"))
    formatted = "\n".join(_wrap_blocks(lines))

    formatted = _INLINE_CODE.sub(CODE_OPEN + r"\1</code>", formatted)
    formatted = _LINK.sub(_render_link, formatted)
    return formatted
