DEFAULT_SIDE = 3

# History list labels
GAME_START_LABEL = "Go to game start"
MOVE_LABEL = "Go to move #{step}"

# Order toggle button, named after the order it switches to
SORT_DECREASING_LABEL = "Sort Decreasing"
SORT_INCREASING_LABEL = "Sort Increasing"

# Status line above the history list
WINNER_STATUS = "Winner: {winner}"
DRAW_STATUS = "Cat's Game"
NEXT_PLAYER_STATUS = "Next player: {player}"

# Reasons reported with EVENT_MOVE_IGNORED
IGNORED_DECIDED = "decided"
IGNORED_OCCUPIED = "occupied"
