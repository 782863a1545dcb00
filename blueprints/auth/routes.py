"""
Auth Routes - Admin login and logout
"""

from flask import render_template, redirect, url_for, request, flash, jsonify, current_app
from flask_login import current_user, login_user, logout_user
from models import User
from utils.errors import Unauthorized
from utils.helpers import get_json_body
from utils.security import get_client_ip, verify_password
from . import auth_bp


def _credentials():
    """Email and password from a JSON body or a submitted form"""
    if request.is_json:
        body = get_json_body()
        return str(body.get('email') or '').strip(), str(body.get('password') or '')
    return request.form.get('email', '').strip(), request.form.get('password', '')


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Admin login"""
    if request.method == 'GET':
        if current_user.is_authenticated:
            return redirect(url_for('admin.index'))
        return render_template('admin/login.html')

    email, password = _credentials()
    user = User.query.filter_by(email=email).first() if email else None

    if user is None or not user.is_active or not verify_password(password, user.password_hash):
        current_app.logger.warning(f"Failed admin login for {email!r} from {get_client_ip()}")
        if request.is_json:
            raise Unauthorized()
        flash('Invalid credentials. Please try again.', 'error')
        return render_template('admin/login.html', email=email), 401

    login_user(user)
    current_app.logger.info(f"Admin login: {user.email} from {get_client_ip()}")

    if request.is_json:
        return jsonify({'message': 'Logged in successfully', 'user': user.to_dict()}), 200
    return redirect(url_for('admin.index'))


@auth_bp.route('/logout', methods=['GET', 'POST'])
def logout():
    """Logout current user"""
    if current_user.is_authenticated:
        current_app.logger.info(f"Admin logout: {current_user.email}")
    logout_user()
    flash('Logged out successfully', 'success')
    return redirect(url_for('auth.login'))
