"""Excel export of scored match results."""

from pathlib import Path

import openpyxl
from openpyxl.styles import Font

from .aggregation import rank_teams
from .models import AggregateResult

TEAM_HEADERS = ('Rank', 'Team', 'Captain', 'Vice-captain', 'Total', 'Winner')
PLAYER_HEADERS = ('Team', 'Player', 'Role', 'Captaincy', 'Points')


def export_results_to_excel(excel_path: str | Path, result: AggregateResult) -> None:
    """
    Write scored match results to a new workbook.

    Sheets:
        Teams: one row per entry, highest total first, winners in bold
        Players: one row per selected player with points

    Args:
        excel_path: Path of the .xlsx file to write (overwritten if present)
        result: AggregateResult from scoring
    """
    wb = openpyxl.Workbook()
    teams_ws = wb.active
    teams_ws.title = 'Teams'
    players_ws = wb.create_sheet('Players')

    bold = Font(bold=True)
    teams_ws.append(TEAM_HEADERS)
    players_ws.append(PLAYER_HEADERS)
    for cell in teams_ws[1] + players_ws[1]:
        cell.font = bold

    winner_ids = {id(team) for team in result.winners}

    for rank, team in rank_teams(result.teams):
        is_winner = id(team) in winner_ids
        teams_ws.append(
            (rank, team.name, team.captain, team.vice_captain, team.total_points, 'Yes' if is_winner else '')
        )
        if is_winner:
            for cell in teams_ws[teams_ws.max_row]:
                cell.font = bold

        for name in team.players:
            ps = team.scores.get(name)
            if name == team.captain:
                captaincy = 'C'
            elif name == team.vice_captain:
                captaincy = 'VC'
            else:
                captaincy = ''
            players_ws.append(
                (team.name, name, ps.role if ps else '', captaincy, ps.total_points if ps else 0.0)
            )

    excel_path = Path(excel_path)
    excel_path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(excel_path)
    wb.close()
    print(f'\nScores saved to {excel_path}')
