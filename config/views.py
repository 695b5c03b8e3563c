# config/views.py

from django.shortcuts import render, redirect

"""
Landing page ('/'). Signed-in users skip it and land on the page
that matches their role: teachers on their dashboard, learners on
session discovery.
"""
def home_view(request):
    if request.user.is_authenticated:
        if request.user.is_teacher:
            return redirect('teaching_dashboard')
        return redirect('discover')
    return render(request, 'home.html')
