"""Template-based pattern matching for intent classification.

Converts templates like "[call|run] {the|my} $name [with|using] $args" into
compiled regex, matches them against a whole command, and returns the
captured fields.

Syntax:
    [alt1|alt2|alt3]  : matches any of the alternatives
    {alt1|alt2}       : optional alternatives (swallows the whitespace after it)
    $name             : captures text into a named field (lazy, minimal length)
    literal text      : matches literally (case-insensitive, flexible whitespace)

Matching is anchored at both ends: a template either accounts for the whole
command or does not match at all. Because captures are lazy, a capture that
is followed by a literal stops at the *first* occurrence of that literal:

    >>> p = TemplatePattern("call $name with $args")
    >>> p.match("call greet with hi with feeling")
    {'name': 'greet', 'args': 'hi with feeling'}

The command text is matched as given (only surrounding whitespace is
ignored), so trailing punctuation stays part of the last capture unless the
pattern names it as an optional_suffix:

    >>> TemplatePattern("what is $path", optional_suffix="?").match("what is counter?")
    {'path': 'counter'}
"""

import re


class TemplatePattern:
    """A compiled template that can match a command and extract named fields."""

    def __init__(self, template, optional_suffix=""):
        if not isinstance(template, str):
            raise TypeError(f"template must be a string, not {type(template).__name__}")
        self.template = template
        self.optional_suffix = optional_suffix
        self._regex, self._group_map = _compile(template, optional_suffix)

    @property
    def fields(self):
        """Names of the capture fields, in template order."""
        return [self._group_map[n] for n in sorted(self._group_map)]

    def match(self, text):
        """Match the whole of text against this pattern. Returns dict of fields or None."""
        m = self._regex.match(text.strip())
        if m is None:
            return None
        result = {}
        for group_num, field_name in self._group_map.items():
            value = m.group(group_num)
            if value is not None:
                result[field_name] = value.strip()
        return result

    def __repr__(self):
        return f"TemplatePattern({self.template!r})"


def match_first(patterns, text):
    """Try each pattern in order; return (pattern, fields) for the first match, or None."""
    for pattern in patterns:
        fields = pattern.match(text)
        if fields is not None:
            return pattern, fields
    return None


# --- Compilation internals ---

_OPEN = {"[": "]", "{": "}"}


class _Compiler:
    """Stateful compiler that tracks capturing group numbers."""

    def __init__(self):
        self.group_count = 0
        self.group_map = {}  # group_number -> field_name

    def compile_template(self, template, optional_suffix=""):
        """Compile a full template string. Returns (regex_str, group_map)."""
        regex_str = self._compile_fragment(template.strip())
        if optional_suffix:
            regex_str += r"\s*(?:" + re.escape(optional_suffix) + ")?"
        return '^' + regex_str + '$', self.group_map

    def _compile_fragment(self, s):
        parts = []
        i = 0
        while i < len(s):
            ch = s[i]
            if ch in _OPEN:
                j = _find_close(s, i)
                alts = _split_alternatives(s[i+1:j])
                body = '(?:' + '|'.join(self._compile_fragment(a) for a in alts) + ')'
                i = j + 1
                if ch == '{':
                    # Optional group owns its trailing whitespace so that
                    # "show {me} $x" matches both "show me x" and "show x".
                    if i < len(s) and s[i] in ' \t':
                        while i < len(s) and s[i] in ' \t':
                            i += 1
                        body = '(?:' + body + r'\s+)?'
                    else:
                        body = body + '?'
                parts.append(body)
            elif ch == '$':
                m = re.match(r'\$([a-zA-Z_]\w*)', s[i:])
                if m:
                    self.group_count += 1
                    self.group_map[self.group_count] = m.group(1)
                    parts.append('(.+?)')
                    i += m.end()
                else:
                    parts.append(re.escape(ch))
                    i += 1
            elif ch in ' \t':
                while i < len(s) and s[i] in ' \t':
                    i += 1
                parts.append(r'\s+')
            else:
                parts.append(re.escape(ch))
                i += 1
        return ''.join(parts)


def _find_close(s, start):
    """Index of the bracket closing the one at s[start]."""
    depth = 0
    for j in range(start, len(s)):
        if s[j] in _OPEN:
            depth += 1
        elif s[j] in _OPEN.values():
            depth -= 1
            if depth == 0:
                return j
    raise ValueError(f"unbalanced brackets in template: {s!r}")


def _split_alternatives(text):
    """Split on top-level | characters, respecting nested brackets."""
    alts = []
    depth = 0
    current = []
    for ch in text:
        if ch in _OPEN:
            depth += 1
        elif ch in _OPEN.values():
            depth -= 1
        elif ch == '|' and depth == 0:
            alts.append(''.join(current))
            current = []
            continue
        current.append(ch)
    alts.append(''.join(current))
    return alts


def _compile(template, optional_suffix=""):
    """Compile a template string to a (compiled_regex, group_map) tuple."""
    pattern_str, group_map = _Compiler().compile_template(template, optional_suffix)
    return re.compile(pattern_str, re.IGNORECASE), group_map
