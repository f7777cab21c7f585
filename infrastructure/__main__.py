import pulumi

from remote_dev.config import load_settings
from remote_dev.stack import build_stack, stack_outputs

# --- Configuration ---
settings = load_settings()

# --- Resources ---
remote_dev = build_stack(settings)

# --- Exports ---
for output_name, value in stack_outputs(remote_dev).items():
    pulumi.export(output_name, value)
