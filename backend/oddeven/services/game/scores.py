from oddeven import db
from oddeven.models import Score

from .roles import ROLE_PRIORITY, Role


class ScoreStore:
    """Win/loss tally per role, kept in the application database.

    Must be called inside an application context. A game ended by a
    disconnect is never recorded.
    """

    def _row(self, role: Role, create: bool = True) -> Score:
        row = db.session.get(Score, role.value)
        if row is None:
            row = Score(role=role.value, wins=0, losses=0, games_played=0, current_streak=0)
            if create:
                db.session.add(row)
        return row

    def record_result(self, winner: Role) -> None:
        try:
            for role in ROLE_PRIORITY:
                self._row(role).apply('win' if role is winner else 'loss')
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

    def get_scores(self):
        return {role.value: self._row(role, create=False).to_dict() for role in ROLE_PRIORITY}

    def reset_scores(self) -> None:
        try:
            Score.query.delete()
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
