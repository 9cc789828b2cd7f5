"""Scripted button stimuli for the lane-dodge emulator."""
