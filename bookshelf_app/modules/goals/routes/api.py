from flask import jsonify, request
from flask_login import current_user, login_required
from pydantic import ValidationError as PydanticValidationError

from bookshelf_app.core.error_handlers import NotFoundError, ValidationError, success_response
from bookshelf_app.core.extensions import csrf_protect
from .. import goals_bp
from ..schemas import ReadingGoalPayload
from ..services.goal_service import ReadingGoalService
from ..view_helpers import describe_schedule


@goals_bp.route('/api/progress', methods=['GET'])
@login_required
def get_progress_api():
    """Progress towards the current user's goal for this year."""
    progress = ReadingGoalService.get_progress(current_user.user_id)
    if progress is None:
        raise NotFoundError('No reading goal set for this year', resource='reading_goal')

    data = progress.to_dict()
    data['message'] = describe_schedule(progress)
    return jsonify(success_response(data))


@goals_bp.route('/api/goal', methods=['PUT'])
@login_required
@csrf_protect.exempt
def set_goal_api():
    try:
        payload = ReadingGoalPayload.model_validate(request.get_json(silent=True) or {})
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc, 'Invalid reading goal') from exc

    goal = ReadingGoalService.set_goal(
        current_user.user_id,
        payload.goal_type,
        payload.target,
        year=payload.year,
    )
    return jsonify(success_response({
        'goal_id': goal.goal_id,
        'goal_type': goal.goal_type,
        'target': goal.target,
        'year': goal.year,
    }, message='Reading goal saved'))


@goals_bp.route('/api/goal', methods=['DELETE'])
@login_required
@csrf_protect.exempt
def delete_goal_api():
    ReadingGoalService.delete_goal(current_user.user_id)
    return jsonify(success_response(message='Reading goal removed'))
