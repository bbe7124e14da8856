"""Terminal-facing runtime: terminal control, frame output and the frame loop."""
