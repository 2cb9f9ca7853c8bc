from flask import flash, redirect, render_template, request, url_for
from flask_login import current_user, login_required

from .. import goals_bp
from ..forms import ReadingGoalForm
from ..services.goal_service import ReadingGoalService
from ..view_helpers import build_goal_summary


@goals_bp.route('/', methods=['GET', 'POST'])
@login_required
def overview():
    """Show this year's goal and progress, and let the user set or change it."""
    goal = ReadingGoalService.get_goal(current_user.user_id)
    form = ReadingGoalForm(obj=goal)

    if form.validate_on_submit():
        ReadingGoalService.set_goal(
            current_user.user_id,
            form.goal_type.data,
            form.target.data,
        )
        flash('Reading goal saved.', 'success')
        return redirect(url_for('goals.overview'))

    summary = build_goal_summary(ReadingGoalService.get_progress(current_user.user_id))
    status = 400 if request.method == 'POST' else 200
    return render_template(
        'goals/overview.html',
        form=form,
        summary=summary,
    ), status


@goals_bp.route('/delete', methods=['POST'])
@login_required
def delete_goal():
    goal = ReadingGoalService.get_goal(current_user.user_id)
    if goal is None:
        flash('You have not set a reading goal this year.', 'warning')
    else:
        ReadingGoalService.delete_goal(current_user.user_id, goal.year)
        flash('Reading goal removed.', 'success')
    return redirect(url_for('goals.overview'))
