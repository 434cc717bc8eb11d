"""Backend for the flappy-face browser game: avatars, faces and a score leaderboard."""
