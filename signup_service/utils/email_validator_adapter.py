"""
Sign-Up Service — Email Validator Adapter
===========================================

What:  EmailValidator implementation backed by the `email-validator` library.
How:   Syntax check only: deliverability (DNS) checks are disabled so the
       call never touches the network.
"""

from email_validator import EmailNotValidError, validate_email

from signup_service.presentation.protocols import EmailValidator


class EmailValidatorAdapter(EmailValidator):

    def is_valid(self, email: str) -> bool:
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            return False
        return True
