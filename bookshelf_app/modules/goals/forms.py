"""Forms used by the reading goals module."""

from __future__ import annotations

from flask_wtf import FlaskForm
from wtforms import IntegerField, SelectField, SubmitField
from wtforms.validators import DataRequired, NumberRange

from .constants import GOAL_TYPE_CHOICES, GoalType


class ReadingGoalForm(FlaskForm):
    """Form used to create or update this year's reading goal."""

    goal_type = SelectField('Goal type', choices=GOAL_TYPE_CHOICES, default=GoalType.BOOKS.value,
                            validators=[DataRequired()])
    target = IntegerField('Target', validators=[DataRequired(), NumberRange(min=1)])
    submit = SubmitField('Save goal')
