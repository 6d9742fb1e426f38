# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "Error",
    "dialog.warning": "Warning",
    "dialog.success": "Success",
    "dialog.info": "Information",

    # Buttons
    "button.previous": "Previous",
    "button.next": "Save & Next",
    "button.finish": "Finish",
    "button.close": "Close",
    "button.add": "Add",
    "button.remove": "Remove",
    "button.paste": "Paste code",
    "button.return_to_verification": "Back to verification",

    # Wizard
    "wizard.title": "Create your Hami account",
    "wizard.progress": "Step {current} of {total}",
    "wizard.loading": "Loading...",

    # Step: Information
    "step.information.title": "Welcome to Hami",
    "step.information.description": "A companion for your mental wellness.",
    "step.information.content": (
        "Hami helps you track your mood, keep a journal and understand yourself better. "
        "Signing up takes a few minutes."
    ),

    # Step: Terms
    "step.terms.title": "Terms and Consent",
    "step.terms.description": "Please review and accept the terms to continue.",
    "step.terms.mandatory_label": "I accept the terms and conditions of use",
    "step.terms.communications_label": "I agree to the processing of my data to receive service communications",
    "step.terms.marketing_label": "I would like to receive news and offers",
    "step.terms.info_note": "Only the first item is required. You can change optional consents later in settings.",

    # Step: User info
    "step.user_info.title": "Your Information",
    "step.user_info.description": "Tell us a little about yourself.",
    "step.user_info.name_label": "Name",
    "step.user_info.name_placeholder": "Your name",
    "step.user_info.contact_label": "Email or phone number",
    "step.user_info.contact_placeholder": "name@example.com or +98 912 000 0000",
    "step.user_info.dob_label": "Date of birth",
    "step.user_info.dob_placeholder": "Pick a date",
    "step.user_info.password_label": "Password",
    "step.user_info.confirm_password_label": "Confirm password",

    # Step: Verification
    "step.verification.title": "Verify your account",
    "step.verification.description_email": "We sent a 5-digit code to {contact}.",
    "step.verification.description_phone": "We sent a 5-digit code by SMS to {contact}.",
    "step.verification.code_label": "Verification code",
    "step.verification.open_email": "Open {domain}",
    "step.verification.verified": "Code entered",
    "step.verification.did_not_receive": "Didn't receive the code? Check your spam folder or try again later.",

    # Step: Role selection
    "step.role_selection.title": "Your Role",
    "step.role_selection.description": "Select the roles that describe how you will use Hami.",
    "step.role_selection.clinic_code_label": "Clinic code",
    "step.role_selection.school_code_label": "School code",

    # Step: Sharing
    "step.sharing.title": "Sharing Preferences",
    "step.sharing.description_youth": "Choose who can see your information. You can skip this step.",
    "step.sharing.description_adult": "Connect with people you support or who support you. This step is optional.",
    "step.sharing.contact_label": "Email or phone of the person",
    "step.sharing.add_connection": "Add connection",
    "step.sharing.empty": "No connections yet.",
    "step.sharing.permissions_prefix": "Shared:",

    # Step: Waiting (branch not resolved)
    "step.waiting.title": "Loading role information...",
    "step.waiting.description": "Your age group has not been determined yet.",

    # Roles
    "role.parent": "Parent",
    "role.therapist": "Therapist",
    "role.school_consultant": "School consultant",
    "role.supervisor": "Supervisor",

    # Permissions
    "permission.basic_information": "Basic information",
    "permission.daily_quiz_results": "Daily quiz results",
    "permission.biometric_reports": "Biometric reports",
    "permission.test_results": "Test results",
    "permission.synced_information": "Synced information",
    "permission.others_notes": "Others' notes",

    # Sharing summaries
    "sharing.summary.none": "No permissions granted",
    "sharing.summary.all": "All items",
    "sharing.summary.separator": ", ",

    # Validation
    "validation.check_data": "Please check the entered data.",
    "validation.field_required": "{field} is required.",
    "validation.terms_required": "You must accept the terms and conditions to continue.",
    "validation.name_required": "Name is required.",
    "validation.contact_required": "Email or phone number is required.",
    "validation.contact_invalid": "Enter a valid email address or phone number.",
    "validation.dob_required": "Date of birth is required.",
    "validation.dob_invalid": "Enter a valid date of birth.",
    "validation.dob_in_future": "Date of birth cannot be in the future.",
    "validation.dob_too_early": "Date of birth cannot be before {earliest}.",
    "validation.password_min_length": "Password must be at least {min_length} characters.",
    "validation.passwords_dont_match": "Passwords do not match.",
    "validation.code_length": "Enter the {length}-digit code.",
    "validation.school_code_required": "School code is required for school consultants.",
    "validation.permissions_required": "Select at least one permission.",

    # Errors
    "error.generic": "Something went wrong. Please try again.",
    "error.clipboard_failed": "Could not read the clipboard.",
    "error.paste_invalid": "The clipboard does not contain a valid code.",
    "error.step_failed": "This step could not be displayed.",

    # Completion
    "celebration.title": "Welcome aboard!",
    "celebration.description": "Your account is ready.",
    "landing.welcome": "Welcome, {name}",
    "landing.connections_title": "Your sharing connections",
}
