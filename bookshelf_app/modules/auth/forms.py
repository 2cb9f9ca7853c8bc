# File: bookshelf_app/modules/auth/forms.py
# Login and registration forms.

import pytz
from flask_wtf import FlaskForm
from wtforms import BooleanField, PasswordField, SelectField, StringField, SubmitField
from wtforms.validators import DataRequired, Email, EqualTo, Length, Optional, ValidationError

from bookshelf_app.models import User


class LoginForm(FlaskForm):
    username = StringField('Username', validators=[DataRequired(message="Please enter your username.")])
    password = PasswordField('Password', validators=[DataRequired(message="Please enter your password.")])
    remember_me = BooleanField('Remember me')
    submit = SubmitField('Log in')


class RegistrationForm(FlaskForm):
    username = StringField('Username', validators=[DataRequired(message="Please enter a username."), Length(max=80)])
    email = StringField('Email', validators=[Optional(), Email(), Length(max=120)])
    timezone = SelectField('Timezone', choices=[(tz, tz) for tz in pytz.common_timezones], default='UTC')
    password = PasswordField('Password', validators=[DataRequired(message="Please enter a password."), Length(min=6)])
    password2 = PasswordField(
        'Repeat password',
        validators=[DataRequired(message="Please confirm your password."),
                    EqualTo('password', message='Passwords do not match.')])
    submit = SubmitField('Register')

    def validate_username(self, username):
        """Usernames must be unique."""
        if User.query.filter_by(username=username.data).first() is not None:
            raise ValidationError('This username is already taken.')

    def validate_email(self, email):
        if email.data and User.query.filter_by(email=email.data).first() is not None:
            raise ValidationError('This email is already registered.')
