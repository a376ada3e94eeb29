"""
Forms for tasks app.

The JSON endpoints bind the decoded request body to these forms, the same
way HTML views bind request.POST.

Includes:
- TaskForm: Create a task for yourself
- AssignTaskForm: Manager creates a task for an employee
- TaskUpdateForm: Partial update (owner fields and manager reply)
"""

from django import forms

from .models import Task
from apps.accounts.models import User


class TaskForm(forms.ModelForm):
    """Form for an employee logging a task."""

    class Meta:
        model = Task
        fields = ['text', 'status', 'blocker_reason']

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['text'].error_messages['required'] = 'Please add a task description'
        self.fields['status'].required = False
        self.fields['blocker_reason'].required = False

    def clean_text(self):
        text = self.cleaned_data.get('text', '')
        if not text.strip():
            raise forms.ValidationError('Please add a task description')
        return text.strip()

    def clean_status(self):
        return self.cleaned_data.get('status') or Task.Status.PENDING


class AssignTaskForm(forms.Form):
    """Form for a manager assigning a task to an employee."""

    text = forms.CharField(
        error_messages={'required': 'Please add text and select a user.'},
    )
    user = forms.ModelChoiceField(
        queryset=User.objects.none(),
        error_messages={
            'required': 'Please add text and select a user.',
            'invalid_choice': 'Selected user not found.',
        },
    )
    deadline = forms.CharField(max_length=100, required=False)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['user'].queryset = User.objects.filter(is_active=True)


class TaskUpdateForm(forms.Form):
    """
    Partial update of a task.

    Only keys present in the payload are reported by changed_fields();
    absent keys are left untouched by the service.
    """

    text = forms.CharField(required=False)
    status = forms.ChoiceField(choices=Task.Status.choices, required=False)
    blocker_reason = forms.CharField(required=False)
    manager_reply = forms.CharField(required=False)

    def clean_text(self):
        text = self.cleaned_data.get('text', '')
        if 'text' in self.data and not text.strip():
            raise forms.ValidationError('Task text cannot be empty.')
        return text.strip()

    def changed_fields(self):
        """Cleaned values for the keys the client actually sent."""
        return {
            name: value
            for name, value in self.cleaned_data.items()
            if name in self.data
        }
