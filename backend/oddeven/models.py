from oddeven import db


class Score(db.Model):
    __tablename__ = 'score'
    role = db.Column(db.String(16), primary_key=True)
    wins = db.Column(db.Integer, default=0, nullable=False)
    losses = db.Column(db.Integer, default=0, nullable=False)
    games_played = db.Column(db.Integer, default=0, nullable=False)
    current_streak = db.Column(db.Integer, default=0, nullable=False)
    streak_type = db.Column(db.String(8), nullable=True)  # win, loss

    @property
    def win_percentage(self):
        if not self.games_played:
            return 0
        return round(self.wins * 100 / self.games_played)

    @property
    def streak_text(self):
        if not self.streak_type or not self.current_streak:
            return 'No streak'
        return f"{self.current_streak} {self.streak_type.capitalize()} streak"

    def apply(self, result):
        self.games_played = (self.games_played or 0) + 1
        if result == 'win':
            self.wins = (self.wins or 0) + 1
        else:
            self.losses = (self.losses or 0) + 1
        if self.streak_type == result:
            self.current_streak = (self.current_streak or 0) + 1
        else:
            self.current_streak = 1
            self.streak_type = result

    def to_dict(self):
        return {
            'role': self.role,
            'wins': self.wins or 0,
            'losses': self.losses or 0,
            'gamesPlayed': self.games_played or 0,
            'currentStreak': self.current_streak or 0,
            'streakType': self.streak_type,
            'winPercentage': self.win_percentage,
            'streakText': self.streak_text,
        }
