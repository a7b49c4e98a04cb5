from __future__ import annotations

from flask import Flask, g, session

from ..common.http import ok
from ..common.web import json_body, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    services = container.data_services

    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    async def login():
        body = json_body()
        s_user = await services.login(str(body.get("email", "")), str(body.get("password", "")))

        session.clear()
        session["user_id"] = s_user.user_id
        return ok(s_user)

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    async def logout():
        session.clear()
        return ok()

    @app.route("/api/auth/me", methods=["GET"], endpoint="me")
    @login_required
    async def me():
        return ok(g.current_user)
