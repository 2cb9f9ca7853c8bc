from urllib.parse import urlparse

from flask import flash, redirect, render_template, request, url_for
from flask_login import current_user, login_required, login_user, logout_user

from .. import auth_bp
from ..forms import LoginForm, RegistrationForm
from ..services.auth_service import AuthService

HOME_ENDPOINT = 'goals.overview'


def _next_url() -> str:
    """Where to go after logging in. Absolute URLs are ignored."""
    target = request.args.get('next')
    if target and not urlparse(target).netloc and target.startswith('/'):
        return target
    return url_for(HOME_ENDPOINT)


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    if current_user.is_authenticated:
        return redirect(url_for(HOME_ENDPOINT))

    form = LoginForm()
    if not form.validate_on_submit():
        return render_template('auth/login.html', form=form)

    user = AuthService.authenticate_user(form.username.data, form.password.data)
    if user is None:
        flash('Invalid username or password.', 'danger')
        return redirect(url_for('auth.login', next=request.args.get('next')))

    login_user(user, remember=form.remember_me.data)
    flash(f'Welcome back, {user.username}.', 'success')
    return redirect(_next_url())


@auth_bp.route('/logout', methods=['POST'])
@login_required
def logout():
    logout_user()
    flash('You have been logged out.', 'info')
    return redirect(url_for('auth.login'))


@auth_bp.route('/register', methods=['GET', 'POST'])
def register():
    if current_user.is_authenticated:
        return redirect(url_for(HOME_ENDPOINT))

    form = RegistrationForm()
    if form.validate_on_submit():
        AuthService.register_user(
            username=form.username.data,
            password=form.password.data,
            email=form.email.data,
            timezone=form.timezone.data,
        )
        flash('Your account is ready, please log in.', 'success')
        return redirect(url_for('auth.login'))

    return render_template('auth/register.html', form=form)
