# -*- coding: utf-8 -*-
"""Persian translations."""

FA_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "خطا",
    "dialog.warning": "هشدار",
    "dialog.success": "موفقیت",
    "dialog.info": "اطلاعات",

    # Buttons
    "button.previous": "قبلی",
    "button.next": "ذخیره و بعدی",
    "button.finish": "پایان",
    "button.close": "بستن",
    "button.add": "افزودن",
    "button.remove": "حذف",
    "button.paste": "چسباندن کد",
    "button.return_to_verification": "بازگشت به تأیید",

    # Wizard
    "wizard.title": "ساخت حساب کاربری حامی",
    "wizard.progress": "مرحله {current} از {total}",
    "wizard.loading": "در حال بارگذاری...",

    # Step: Information
    "step.information.title": "به حامی خوش آمدید",
    "step.information.description": "همراهی برای سلامت روان شما.",
    "step.information.content": (
        "حامی به شما کمک می‌کند حال خود را ثبت کنید، یادداشت بنویسید و خودتان را بهتر بشناسید. "
        "ثبت‌نام تنها چند دقیقه طول می‌کشد."
    ),

    # Step: Terms
    "step.terms.title": "شرایط و رضایت‌نامه",
    "step.terms.description": "لطفاً برای ادامه، شرایط را مطالعه و تأیید کنید.",
    "step.terms.mandatory_label": "شرایط و قوانین استفاده را می‌پذیرم",
    "step.terms.communications_label": "با پردازش داده‌هایم برای دریافت پیام‌های سرویس موافقم",
    "step.terms.marketing_label": "مایلم اخبار و پیشنهادها را دریافت کنم",
    "step.terms.info_note": "تنها مورد اول الزامی است. موارد اختیاری را بعداً در تنظیمات می‌توانید تغییر دهید.",

    # Step: User info
    "step.user_info.title": "اطلاعات شما",
    "step.user_info.description": "کمی درباره خودتان بگویید.",
    "step.user_info.name_label": "نام",
    "step.user_info.name_placeholder": "نام شما",
    "step.user_info.contact_label": "ایمیل یا شماره تلفن",
    "step.user_info.contact_placeholder": "name@example.com یا ۰۹۱۲۰۰۰۰۰۰۰",
    "step.user_info.dob_label": "تاریخ تولد",
    "step.user_info.dob_placeholder": "انتخاب تاریخ",
    "step.user_info.password_label": "رمز عبور",
    "step.user_info.confirm_password_label": "تکرار رمز عبور",

    # Step: Verification
    "step.verification.title": "تأیید حساب کاربری",
    "step.verification.description_email": "یک کد ۵ رقمی به {contact} ارسال شد.",
    "step.verification.description_phone": "یک کد ۵ رقمی با پیامک به {contact} ارسال شد.",
    "step.verification.code_label": "کد تأیید",
    "step.verification.open_email": "باز کردن {domain}",
    "step.verification.verified": "کد وارد شد",
    "step.verification.did_not_receive": "کد را دریافت نکردید؟ پوشه هرزنامه را بررسی کنید یا کمی بعد دوباره تلاش کنید.",

    # Step: Role selection
    "step.role_selection.title": "نقش شما",
    "step.role_selection.description": "نقش‌هایی را که نحوه استفاده شما از حامی را توصیف می‌کنند انتخاب کنید.",
    "step.role_selection.clinic_code_label": "کد کلینیک",
    "step.role_selection.school_code_label": "کد مدرسه",

    # Step: Sharing
    "step.sharing.title": "تنظیمات اشتراک‌گذاری",
    "step.sharing.description_youth": "انتخاب کنید چه کسانی اطلاعات شما را ببینند. این مرحله اختیاری است.",
    "step.sharing.description_adult": "با افرادی که از آن‌ها حمایت می‌کنید یا از شما حمایت می‌کنند ارتباط بگیرید. این مرحله اختیاری است.",
    "step.sharing.contact_label": "ایمیل یا تلفن فرد",
    "step.sharing.add_connection": "افزودن ارتباط",
    "step.sharing.empty": "هنوز ارتباطی اضافه نشده است.",
    "step.sharing.permissions_prefix": "موارد اشتراک‌گذاری:",

    # Step: Waiting (branch not resolved)
    "step.waiting.title": "در حال بارگذاری اطلاعات نقش...",
    "step.waiting.description": "گروه سنی شما هنوز مشخص نشده است.",

    # Roles
    "role.parent": "والد",
    "role.therapist": "درمانگر",
    "role.school_consultant": "مشاور مدرسه",
    "role.supervisor": "سرپرست",

    # Permissions
    "permission.basic_information": "اطلاعات پایه",
    "permission.daily_quiz_results": "نتایج پرسش‌نامه روزانه",
    "permission.biometric_reports": "گزارش‌های زیستی",
    "permission.test_results": "نتایج آزمون‌ها",
    "permission.synced_information": "اطلاعات همگام‌شده",
    "permission.others_notes": "یادداشت‌های دیگران",

    # Sharing summaries
    "sharing.summary.none": "هیچ اجازه‌ای داده نشده",
    "sharing.summary.all": "همه موارد",
    "sharing.summary.separator": "، ",

    # Validation
    "validation.check_data": "لطفاً اطلاعات وارد شده را بررسی کنید.",
    "validation.field_required": "{field} الزامی است.",
    "validation.terms_required": "برای ادامه باید شرایط و قوانین را بپذیرید.",
    "validation.name_required": "نام الزامی است.",
    "validation.contact_required": "ایمیل یا شماره تلفن الزامی است.",
    "validation.contact_invalid": "یک ایمیل یا شماره تلفن معتبر وارد کنید.",
    "validation.dob_required": "تاریخ تولد الزامی است.",
    "validation.dob_invalid": "یک تاریخ تولد معتبر وارد کنید.",
    "validation.dob_in_future": "تاریخ تولد نمی‌تواند در آینده باشد.",
    "validation.dob_too_early": "تاریخ تولد نمی‌تواند پیش از {earliest} باشد.",
    "validation.password_min_length": "رمز عبور باید حداقل {min_length} کاراکتر باشد.",
    "validation.passwords_dont_match": "رمزهای عبور یکسان نیستند.",
    "validation.code_length": "کد {length} رقمی را وارد کنید.",
    "validation.school_code_required": "برای مشاور مدرسه، وارد کردن کد مدرسه الزامی است.",
    "validation.permissions_required": "حداقل یک مورد را برای اشتراک‌گذاری انتخاب کنید.",

    # Errors
    "error.generic": "مشکلی پیش آمد. لطفاً دوباره تلاش کنید.",
    "error.clipboard_failed": "خواندن کلیپ‌بورد ممکن نشد.",
    "error.paste_invalid": "کلیپ‌بورد شامل کد معتبری نیست.",
    "error.step_failed": "نمایش این مرحله ممکن نشد.",

    # Completion
    "celebration.title": "خوش آمدید!",
    "celebration.description": "حساب کاربری شما آماده است.",
    "landing.welcome": "{name}، خوش آمدید",
    "landing.connections_title": "ارتباط‌های اشتراک‌گذاری شما",
}
