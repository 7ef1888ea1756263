"""
Path arithmetic from RFC 3986 section 5.2.

Implements 5.2.3 "Merge Paths" and 5.2.4 "Remove Dot Segments", plus a
variant of the latter that keeps Windows/DOS drive letters in place.
"""

from rfcuri.core.charsets import DRIVE_LETTER_PATTERN


def is_drive_letter(segment: str) -> bool:
    """Return True for a path segment such as ``c:`` or ``D:``."""
    return DRIVE_LETTER_PATTERN.fullmatch(segment) is not None


def remove_dot_segments(path: str, protect_drive_letters: bool = False) -> str:
    """
    Remove "." and ".." segments from a path.

    The path is split on "/" into an input list and segments are moved
    to an output list one by one:

    - ".." discards itself and pops the last output segment unless that
      segment is empty. A trailing ".." leaves an empty segment behind so
      the result keeps its trailing slash.
    - "." discards itself; a trailing "." leaves an empty segment behind.
    - Every other segment is moved as is.

    Args:
        path: Path to normalize, possibly already merged with a base path
        protect_drive_letters: Never pop a drive-letter segment (file URIs)

    Returns:
        Path without dot segments
    """
    input_segments = path.split("/")
    input_segments.reverse()
    output: list[str] = []

    while input_segments:
        segment = input_segments.pop()
        last = not input_segments

        if segment == "..":
            if output and output[-1] != "":
                if not (protect_drive_letters and is_drive_letter(output[-1])):
                    output.pop()
            if last:
                output.append("")
        elif segment == ".":
            if last:
                output.append("")
        else:
            output.append(segment)

    return "/".join(output)


def merge_paths(base_has_authority: bool, base_path: str, reference_path: str) -> str:
    """
    Merge a relative-path reference with the path of the base URI.

    Args:
        base_has_authority: Whether the base URI has an authority component
        base_path: Path of the base URI
        reference_path: Relative path of the reference

    Returns:
        Merged path, still containing any dot segments
    """
    if base_has_authority and base_path == "":
        return "/" + reference_path

    slash = base_path.rfind("/")
    return base_path[: slash + 1] + reference_path


def drive_prefix(path: str) -> str | None:
    """
    Return the part of ``path`` up to and including its drive letter.

    ``"///c:/a/b"`` gives ``"///c:"``; a path without a drive-letter
    segment gives None.
    """
    segments = path.split("/")
    for index, segment in enumerate(segments):
        if is_drive_letter(segment):
            return "/".join(segments[: index + 1])
    return None
