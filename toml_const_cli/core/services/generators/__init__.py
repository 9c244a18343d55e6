"""
Generators — produce the files toml-const-cli lays down next to a package.

Each generator module exposes a ``generate_*()`` function that returns
``GeneratedFile`` instances, plus an ``ensure_*`` / ``update_*`` helper
that hands them to ``writer.write_generated_file``.
"""
