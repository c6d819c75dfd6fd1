import logging


logger = logging.getLogger("rawcli")


def common_chars(left, right):
    """Get the leading part of ``left`` that it has in common with ``right``."""
    n = 0
    for c1, c2 in zip(left, right):
        if c1 != c2:
            break
        n += 1
    return left[:n]


def common_prefix(words):
    """Get the longest prefix that all given words start with."""
    if not words:
        return ""
    common = words[0]
    for word in words:
        common = common_chars(word, common)
    return common


class Autocompleter:
    """Complete the last argument on the line from a list of words.

    All words are expected to start with the last argument on the line.
    If they don't, what ends up on the line is unspecified.

    The completion is appended to the end of the line, but with a single
    word it is written at the cursor. So when the cursor is not at the
    end, the line on screen differs from the text until it is redrawn.
    This is a known limitation.
    """

    def __init__(self, line):
        self._line = line

    def complete(self, words):
        if not words:
            return
        words = list(words)

        last_arg = self._line.tokenize()[-1]
        completion = common_prefix(words)[len(last_arg) :]
        logger.info(f"completing {last_arg!r} with {completion!r} from {len(words)} words")

        line = self._line
        if len(words) == 1:
            # Complete in place
            line.extend(completion)
            line.write(completion)
        else:
            # Show all possibilities, then the partially completed line
            line.write("\n" + "".join(word + " " for word in words))
            line.extend(completion)
            line.write("\n" + line.prompt + line.text)
