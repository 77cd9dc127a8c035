"""
Command-line interface for the SRT to EDL converter
"""
import argparse
import logging
import os
import sys

from .config import Config
from .core import (
    format_seconds,
    frames_to_timecode,
    parse_freeform_timecode,
    parse_srt,
    parse_srt_time,
    srt_timestamp_to_frames,
    FRAME_RATES,
    MARKER_COLORS,
)
from .services import output as output_svc
from .services.errors import SourceReadError, OutputWriteError
from .session import Session


def find_default_config(cwd=None):
    """Return ``config.yml`` or ``config.yaml`` from ``cwd`` if one exists."""
    cwd = cwd or os.getcwd()
    for candidate in ('config.yml', 'config.yaml'):
        path = os.path.join(cwd, candidate)
        if os.path.exists(path):
            return path
    return None


def resolve_output_path(session, output=None, output_dir=None, source_location=None):
    """Pick where the EDL of ``session`` goes.

    ``output`` wins; otherwise the suggested name lands in ``output_dir``,
    or beside a local source file.
    """
    if output:
        return output
    name = session.output_filename()
    if output_dir:
        return os.path.join(output_dir, name)
    if source_location and not source_location.lower().startswith(('http://', 'https://')):
        return os.path.join(os.path.dirname(source_location), name)
    return name


def print_cue_listing(session):
    """Dry-run view: every cue with its SRT times and offset record timecodes."""
    settings = session.settings
    fps = settings.frames_per_second
    parsed = parse_srt(session.source_text)
    offset = parse_freeform_timecode(settings.start_timecode, fps)

    print(f"\n{session.filename or 'source'}: {len(parsed.cues)} cue(s) at {fps:g} fps, "
          f"start {frames_to_timecode(offset, fps)}, color {settings.marker_color}")
    print("=" * 60)
    for number, cue in enumerate(parsed.cues, 1):
        record_in = frames_to_timecode(offset + srt_timestamp_to_frames(cue.start_time, fps), fps)
        record_out = frames_to_timecode(offset + srt_timestamp_to_frames(cue.end_time, fps), fps)
        duration = parse_srt_time(cue.end_time) - parse_srt_time(cue.start_time)
        print(f"{number:03d} {record_in} -> {record_out} ({format_seconds(duration)}) {cue.text}")
    for message in parsed.diagnostics:
        print(f"! {message}")


def process_one_source(location, config, output=None, to_stdout=False, dry_run=False):
    """Convert one input. Returns True on success, False on I/O failure."""
    session = Session()
    try:
        session.settings = config.to_settings(os.path.basename(location))
        result = session.load_file(location, convert=not dry_run)
    except SourceReadError as e:
        print(f"Error reading {location}: {e}", file=sys.stderr)
        return False

    if dry_run:
        print_cue_listing(session)
        return True

    if result is None:
        print(f"{location}: empty file, nothing to convert", file=sys.stderr)
        return True

    for message in result.diagnostics:
        print(f"Warning ({session.filename}): {message}", file=sys.stderr)

    if to_stdout:
        sys.stdout.write(result.text)
        return True

    output_path = resolve_output_path(session, output, config.get('output_dir'), location)
    try:
        output_svc.write_edl(result.text, output_path)
    except OutputWriteError as e:
        print(f"Error writing {output_path}: {e}", file=sys.stderr)
        return False
    print(f"✓ {result.cue_count} markers: {output_path}")
    return True


def build_parser():
    parser = argparse.ArgumentParser(description='Convert SRT subtitles into EDL marker lists for DaVinci Resolve')
    parser.add_argument('inputs', nargs='+', metavar='INPUT', help='SRT file path or http(s) URL')
    parser.add_argument('--config', type=str, help='Path to the YAML configuration file')
    parser.add_argument('--fps', type=str, help=f"Frame rate: {', '.join(f'{r:g}' for r in FRAME_RATES)}")
    parser.add_argument('--marker-color', type=str, help=f"Marker color: {', '.join(MARKER_COLORS)}")
    parser.add_argument('--start-timecode', type=str,
                        help='Timecode of the first frame, e.g. 01:00:00:00, 01:00:00 or 1 (hours)')
    out_group = parser.add_mutually_exclusive_group()
    out_group.add_argument('-o', '--output', type=str, help='Output EDL path (single input only)')
    out_group.add_argument('--output-dir', type=str, help='Output directory for generated EDL files')
    out_group.add_argument('--stdout', action='store_true', help='Print the EDL instead of writing a file')
    parser.add_argument('--dry-run', action='store_true', help='List parsed cues and timecodes without writing files')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser


def main(argv=None):
    """Funzione principale CLI"""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Minimal logging setup; core and services use logging for diagnostics.
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if args.output and len(args.inputs) > 1:
        parser.error('--output can only be used with a single input')

    # Se non viene passato --config, prova a usare un file di default (config.yml o config.yaml)
    try:
        config = Config(config_file=args.config or find_default_config())
    except Exception as e:
        parser.error(str(e))

    # Gli argomenti CLI hanno precedenza sul file di configurazione
    config.update_from_args({
        'fps': args.fps,
        'marker_color': args.marker_color,
        'start_timecode': args.start_timecode,
        'output_dir': args.output_dir,
    })

    try:
        config.to_settings()
    except ValueError as e:
        parser.error(str(e))

    failures = 0
    for location in args.inputs:
        try:
            ok = process_one_source(location, config, output=args.output,
                                    to_stdout=args.stdout, dry_run=args.dry_run)
        except ValueError as e:
            # Per-file overrides are validated only when the file is processed
            print(f"Invalid settings for {location}: {e}", file=sys.stderr)
            ok = False
        if not ok:
            failures += 1

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
