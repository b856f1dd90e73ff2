"""
Services built on top of the game engine (rendering, video export).
"""
