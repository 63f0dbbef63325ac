"""
Application services layer.

- TvMazeSeasonImageProvider: season artwork lookup on TVmaze
"""
