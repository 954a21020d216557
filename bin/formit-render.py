#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# Created: 2026-10-19 10:12:40

import sys
import json
import logging

def parse_args():
  import argparse
  parser = argparse.ArgumentParser(description="""\
Render a form described in a JSON file to HTML.
""", formatter_class = argparse.ArgumentDefaultsHelpFormatter)
  parser.add_argument("--version", action="version", version='%(prog)s 1.0.0')
  parser.add_argument("-o", "--output", metavar="output-file", default=None, help="output file (default: stdout)")
  parser.add_argument("-t", "--template-dir", metavar="template-dir", default=None, help="directory containing fieldset.html etc.")
  parser.add_argument("-c", "--check", action="store_true", help="only check that all templates load")
  parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
  parser.add_argument("file", metavar="form-json-file", nargs="?", help="form description")
  options = parser.parse_args()
  if not options.check and options.file is None:
    parser.error("form-json-file is required unless --check is given")
  return options

def main():
  options = parse_args()
  from formit import settings
  from formit.exceptions import RenderError
  from formit.loader import build_form
  from formit.shortcuts import RenderSettings
  logging.basicConfig(
    level=logging.DEBUG if options.verbose else settings.LOG_LEVEL,
    format="%(asctime)s %(name)s %(levelname)s %(message)s"
  )
  if options.template_dir:
    RenderSettings.reset(options.template_dir)
  try:
    RenderSettings.check()
  except RenderError as e:
    print(f"Error: {e}", file=sys.stderr)
    sys.exit(1)
  if options.check:
    print("All templates loaded.")
    sys.exit()
  try:
    with open(options.file, "r") as f:
      description = json.load(f)
  except (OSError, json.JSONDecodeError) as e:
    print(f"Error: cannot read {options.file}: {e}", file=sys.stderr)
    sys.exit(1)
  try:
    html = build_form(description).render()
  except (RenderError, ValueError) as e:
    print(f"Error: {e}", file=sys.stderr)
    sys.exit(1)
  if options.output:
    with open(options.output, "w") as f:
      f.write(html + "\n")
  else:
    print(html)

if __name__ == '__main__':
  main()
