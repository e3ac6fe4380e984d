"""Command-line subcommands for techradar"""
