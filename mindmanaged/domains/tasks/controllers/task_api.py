"""Task JSON API."""

from __future__ import annotations

from flask import Blueprint, jsonify
from flask_jwt_extended import get_jwt_identity, jwt_required

from mindmanaged.core.utils.responses import error_response, page_count, parse_body, parse_query
from mindmanaged.domains.tasks import services
from mindmanaged.domains.tasks.mappers import map_task
from mindmanaged.domains.tasks.schemas.task_schemas import TaskCreate, TaskListFilter, TaskUpdate

task_api_bp = Blueprint("task_api", __name__)


@task_api_bp.get("")
@jwt_required()
def list_tasks():
    user_id = int(get_jwt_identity())
    params, err = parse_query(TaskListFilter)
    if err:
        return err
    items, total = services.list_tasks(
        user_id,
        status=params.status,
        priority=params.priority,
        category=params.category,
        sort=params.sort,
        page=params.page,
        per_page=params.limit,
    )
    return jsonify(
        {
            "ok": True,
            "items": [map_task(t) for t in items],
            "page": params.page,
            "pages": page_count(total, params.limit),
            "limit": params.limit,
            "total": total,
        }
    )


@task_api_bp.post("")
@jwt_required()
def create_task():
    data, err = parse_body(TaskCreate)
    if err:
        return err
    user_id = int(get_jwt_identity())
    try:
        task = services.create_task(user_id, **data.model_dump())
    except ValueError:
        return error_response("validation_error", 400)
    return jsonify({"ok": True, "message": "Task created successfully", "task": map_task(task)}), 201


@task_api_bp.get("/<int:task_id>")
@jwt_required()
def get_task(task_id: int):
    user_id = int(get_jwt_identity())
    task = services.get_task(user_id, task_id)
    if not task:
        return error_response("not_found", 404, "Task not found")
    return jsonify({"ok": True, "task": map_task(task)})


@task_api_bp.route("/<int:task_id>", methods=["PUT", "PATCH"])
@jwt_required()
def update_task(task_id: int):
    data, err = parse_body(TaskUpdate)
    if err:
        return err
    user_id = int(get_jwt_identity())
    task = services.update_task(user_id, task_id, **data.changes())
    if not task:
        return error_response("not_found", 404, "Task not found")
    return jsonify({"ok": True, "message": "Task updated successfully", "task": map_task(task)})


@task_api_bp.delete("/<int:task_id>")
@jwt_required()
def delete_task(task_id: int):
    user_id = int(get_jwt_identity())
    if not services.delete_task(user_id, task_id):
        return error_response("not_found", 404, "Task not found")
    return jsonify({"ok": True, "message": "Task deleted successfully"})
