"""Prompt template rendering.

The final document is produced by substituting the assembled context into a
``string.Template``. Conditional parts (the question section, the optional filter lines,
the contents heading) are prepared in Python and handed to the template as ready-made
strings, so a template only ever deals with plain ``$name`` placeholders.

Available placeholders:

- ``$query_section``: system prompt and question, or an empty string without a query
- ``$system_prompt``, ``$query``: the raw values
- ``$root_path``: canonical root directory
- ``$tree``: the rendered directory tree
- ``$filter_options``: the filtering summary, one ``- label: value`` line per option
- ``$contents_heading``: "Full content of each file" or "First N lines of each file"
- ``$file_contents``: the concatenated file blocks or a placeholder
- ``$head_lines``: the line limit as a number
"""

import json
from dataclasses import dataclass
from pathlib import Path
from string import Template
from typing import Dict, List, Optional, Sequence

from dir2prompt.config import FilterConfig
from dir2prompt.exceptions import TemplateRenderError
from dir2prompt.log import logger
from dir2prompt.types import PathType

DEFAULT_SYSTEM_PROMPT = (
    "As an experienced software engineer, answer the following question using only the context "
    "information below. If you need additional information, ask for it."
)

NO_CONTENTS_PLACEHOLDER = "(no matching files found, or their contents could not be read)"

QUERY_SECTION_TEMPLATE = Template("""$system_prompt

---

Question: $query

---
""")

OUTPUT_TEMPLATE = """
$query_section
**Context information**

Root path: $root_path
File structure:
$tree

Filtering options:
$filter_options

$contents_heading:
$file_contents

"""


@dataclass(frozen=True)
class TemplateOptions:
    """Option values echoed in the filtering summary.

    Attributes:
        include_ext: Extensions to include, as supplied.
        exclude_ext: Extensions to exclude, as supplied.
        include_path: Include-path regular expressions, as supplied.
        exclude_path: Exclude-path regular expressions, as supplied.
        honor_gitignore: Whether .gitignore rules were applied.
        filter_tree: Whether the tree display was filtered.
    """

    include_ext: Sequence[str] = ()
    exclude_ext: Sequence[str] = ()
    include_path: Sequence[str] = ()
    exclude_path: Sequence[str] = ()
    honor_gitignore: bool = True
    filter_tree: bool = False

    @classmethod
    def from_config(cls, config: FilterConfig) -> "TemplateOptions":
        return cls(
            include_ext=config.include_ext,
            exclude_ext=config.exclude_ext,
            include_path=config.include_path,
            exclude_path=config.exclude_path,
            honor_gitignore=config.honor_gitignore,
            filter_tree=config.filter_tree,
        )


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


def _json_list(values: Sequence[str]) -> str:
    return json.dumps(list(values), ensure_ascii=False, separators=(",", ":"))


def format_filter_options(options: TemplateOptions) -> str:
    """Format the filtering summary.

    List options are shown only when non-empty; both flags are always shown.

    Example:
        >>> print(format_filter_options(TemplateOptions(include_ext=["py", "rs"])))
         - Included extensions: ["py","rs"]
         - Respect .gitignore rules: yes
         - Apply filters to the tree display: no
    """
    lines: List[str] = []
    labeled_lists = [
        ("Included extensions", options.include_ext),
        ("Excluded extensions", options.exclude_ext),
        ("Included paths (regex)", options.include_path),
        ("Excluded paths (regex)", options.exclude_path),
    ]
    for label, values in labeled_lists:
        if values:
            lines.append(f" - {label}: {_json_list(values)}")
    lines.append(f" - Respect .gitignore rules: {_yes_no(options.honor_gitignore)}")
    lines.append(f" - Apply filters to the tree display: {_yes_no(options.filter_tree)}")
    return "\n".join(lines)


def format_contents_heading(head_lines: int) -> str:
    """Heading of the file contents section for a given line limit."""
    if head_lines == 0:
        return "Full content of each file"
    return f"First {head_lines} lines of each file"


def load_template(template_file: PathType) -> str:
    """Read a custom template file.

    Raises:
        TemplateRenderError: If the file cannot be read as UTF-8 text.
    """
    try:
        return Path(template_file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateRenderError(f"Failed to load template '{template_file}'") from e


class PromptTemplate:
    """Renders the prompt document from an assembled context.

    Attributes:
        template (Template): The compiled ``string.Template``.

    Example:
        >>> template = PromptTemplate()
        >>> text = template.render(
        ...     root_path="/project",
        ...     tree=".\\n└── a.py",
        ...     file_contents="",
        ...     head_lines=0,
        ...     options=TemplateOptions(),
        ... )
        >>> "Full content of each file:" in text
        True
        >>> "Question:" in text
        False
    """

    def __init__(self, template_text: Optional[str] = None) -> None:
        """Initialize the PromptTemplate.

        Args:
            template_text: Template source using ``$name`` placeholders. Defaults to the
                built-in OUTPUT_TEMPLATE.
        """
        self.template = Template(OUTPUT_TEMPLATE if template_text is None else template_text)

    @classmethod
    def from_file(cls, template_file: PathType) -> "PromptTemplate":
        """Create a PromptTemplate from a template file.

        Raises:
            TemplateRenderError: If the file cannot be read.
        """
        return cls(load_template(template_file))

    def build_context(
        self,
        *,
        root_path: str,
        tree: str,
        file_contents: str,
        head_lines: int,
        options: TemplateOptions,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
        query: Optional[str] = None,
    ) -> Dict[str, str]:
        """Build the substitution mapping for the template."""
        if query:
            query_section = QUERY_SECTION_TEMPLATE.substitute(system_prompt=system_prompt, query=query)
        else:
            query_section = ""

        return {
            "query_section": query_section,
            "system_prompt": system_prompt,
            "query": query or "",
            "root_path": root_path,
            "tree": tree,
            "filter_options": format_filter_options(options),
            "contents_heading": format_contents_heading(head_lines),
            "file_contents": file_contents if file_contents else NO_CONTENTS_PLACEHOLDER,
            "head_lines": str(head_lines),
        }

    def render(
        self,
        *,
        root_path: str,
        tree: str,
        file_contents: str,
        head_lines: int,
        options: TemplateOptions,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
        query: Optional[str] = None,
    ) -> str:
        """Render the document.

        Args:
            root_path: Canonical root directory.
            tree: Rendered directory tree.
            file_contents: Concatenated file blocks; empty means no files matched.
            head_lines: Line limit used for the contents, 0 for full content.
            options: Option values for the filtering summary.
            system_prompt: Text preceding the question. Only shown with a query.
            query: Optional question. Empty or None omits the question section.

        Returns:
            str: The rendered document.

        Raises:
            TemplateRenderError: If the template references an unknown placeholder or
                contains a malformed ``$`` expression. The original error is chained.
        """
        context = self.build_context(
            root_path=root_path,
            tree=tree,
            file_contents=file_contents,
            head_lines=head_lines,
            options=options,
            system_prompt=system_prompt,
            query=query,
        )
        logger.debug("render_template", placeholders=sorted(context))
        try:
            document = self.template.substitute(context)
        except KeyError as e:
            raise TemplateRenderError(f"Failed to render the output template: unknown placeholder {e}") from e
        except ValueError as e:
            raise TemplateRenderError("Failed to render the output template: malformed placeholder") from e
        logger.debug("render_complete", length=len(document))
        return document
