"""
Static content catalogue for generated roadmaps.

Each template function returns fresh dictionaries so callers can attach notes
or otherwise mutate the result without touching the catalogue.
"""


def _resource(title, url, type_, description):
    return {"title": title, "url": url, "type": type_, "description": description}


def _video(title, url, duration, source, thumbnail=""):
    return {
        "title": title,
        "url": url,
        "thumbnail": thumbnail,
        "duration": duration,
        "source": source,
    }


def _youtube(video_id, title, duration, source):
    return _video(
        title,
        f"https://www.youtube.com/watch?v={video_id}",
        duration,
        source,
        thumbnail=f"https://i.ytimg.com/vi/{video_id}/mqdefault.jpg",
    )


def _exercise(title, description, difficulty):
    return {"title": title, "description": description, "difficulty": difficulty}


def _milestone(title, description, skills, resources, videos, exercises, estimated_time):
    return {
        "title": title,
        "description": description,
        "skills": skills,
        "resources": resources,
        "video_suggestions": videos,
        "exercises": exercises,
        "notes": [],
        "estimated_time": estimated_time,
    }


def javascript_overview(goal, learning_style, beginner):
    if beginner:
        return (
            f"This roadmap will guide you from the basics of JavaScript to becoming proficient enough to {goal}. "
            f"Starting with fundamentals, you'll progress through interactive exercises and projects tailored "
            f"to your {learning_style} learning style."
        )
    return (
        f"Building on your existing knowledge of JavaScript, this advanced roadmap will help you {goal}. "
        f"You'll deepen your expertise through specialized topics and increasingly complex projects aligned "
        f"with your {learning_style} learning preferences."
    )


def python_overview(goal, learning_style, beginner):
    if beginner:
        return (
            f"This personalized roadmap introduces you to Python from the ground up, focusing on helping you {goal}. "
            f"Each milestone includes resources and exercises chosen for your {learning_style} learning style."
        )
    return (
        f"As an experienced Python developer, this roadmap will expand your capabilities to help you {goal}. "
        f"The path focuses on advanced concepts and real-world applications that match your "
        f"{learning_style} learning preferences."
    )


def generic_overview(language, goal, learning_style, beginner):
    if beginner:
        return (
            f"This roadmap provides a structured path to learn {language} from scratch and achieve your goal to {goal}. "
            f"Each step includes carefully selected resources that match your {learning_style} learning style."
        )
    return (
        f"This advanced {language} roadmap will refine your existing skills and help you {goal}. "
        f"The curriculum builds on your current knowledge with specialized topics and projects tailored "
        f"to your {learning_style} learning approach."
    )


def javascript_beginner_milestones():
    return [
        _milestone(
            "JavaScript Fundamentals",
            "Learn the core concepts of JavaScript including variables, data types, operators, and control flow.",
            ["Variables", "Data Types", "Operators", "Control Flow", "Functions"],
            [
                _resource("JavaScript Basics - MDN Web Docs",
                          "https://developer.mozilla.org/en-US/docs/Learn/JavaScript/First_steps",
                          "documentation", "Official Mozilla documentation on JavaScript basics."),
                _resource("JavaScript Fundamentals - The Odin Project",
                          "https://www.theodinproject.com/paths/full-stack-javascript/courses/javascript",
                          "course", "Free, comprehensive JavaScript fundamentals course."),
                _resource("JavaScript Crash Course For Beginners",
                          "https://www.youtube.com/watch?v=hdI2bqOjy3c",
                          "video", "A quick overview of JavaScript fundamentals in one video."),
            ],
            [
                _youtube("W6NZfCO5SIk", "JavaScript Fundamentals for Beginners", "48:17", "Programming with Mosh"),
                _youtube("W6NZfCO5SIk", "JavaScript Tutorial for Beginners: Learn JavaScript in 1 Hour",
                         "1:18:56", "Programming with Mosh"),
            ],
            [
                _exercise("Variable and Data Type Practice",
                          "Create variables of each type and practice converting between types.", "easy"),
                _exercise("Control Flow Challenge",
                          "Write programs using if/else statements and loops to solve simple problems.", "easy"),
                _exercise("Function Builder",
                          "Create functions with parameters and return values to perform specific tasks.", "medium"),
            ],
            "2-3 weeks",
        ),
        _milestone(
            "DOM Manipulation",
            "Learn how to interact with HTML using JavaScript by manipulating the Document Object Model.",
            ["DOM Selection", "Event Handling", "DOM Traversal", "DOM Manipulation"],
            [
                _resource("DOM Manipulation - JavaScript.info", "https://javascript.info/document",
                          "documentation", "Comprehensive guide on working with the Document Object Model."),
                _resource("JavaScript DOM Manipulation Course",
                          "https://www.udemy.com/course/javascript-dom-manipulation/",
                          "course", "Hands-on course covering all aspects of DOM manipulation."),
                _resource("DOM Manipulation in JavaScript", "https://www.youtube.com/watch?v=y17RuWkWdn8",
                          "video", "Visual guide to DOM manipulation techniques."),
            ],
            [
                _youtube("5fb2aPlgoys", "JavaScript DOM Manipulation – Full Course for Beginners",
                         "3:38:45", "freeCodeCamp.org"),
                _youtube("v7rSSy8CaYE", "JavaScript DOM Traversal Made Easy", "12:45", "Web Dev Simplified"),
            ],
            [
                _exercise("Element Selector",
                          "Practice selecting and modifying elements from an HTML page.", "easy"),
                _exercise("Event Listener Workshop",
                          "Create various event listeners to respond to user interactions.", "medium"),
                _exercise("Dynamic Content Creator",
                          "Build a script that dynamically creates and modifies page content.", "medium"),
            ],
            "2-3 weeks",
        ),
        _milestone(
            "Asynchronous JavaScript",
            "Master asynchronous programming concepts including callbacks, promises, and async/await.",
            ["Callbacks", "Promises", "Async/Await", "Fetch API"],
            [
                _resource("Asynchronous JavaScript - MDN",
                          "https://developer.mozilla.org/en-US/docs/Learn/JavaScript/Asynchronous",
                          "documentation", "Official Mozilla guide to asynchronous JavaScript concepts."),
                _resource("JavaScript Promises, Async/Await - freeCodeCamp",
                          "https://www.freecodecamp.org/learn/javascript-algorithms-and-data-structures/",
                          "course", "Interactive lessons on promises and async functions."),
                _resource("Asynchronous JavaScript Tutorial", "https://www.youtube.com/watch?v=PoRJizFvM7s",
                          "video", "Comprehensive video on handling asynchronous operations."),
            ],
            [
                _youtube("PoRJizFvM7s", "Async JavaScript Crash Course - Callbacks, Promises, Async Await",
                         "38:52", "Traversy Media"),
                _youtube("DHvZLI7Db8E", "JavaScript Promises In 10 Minutes", "10:25", "Web Dev Simplified"),
            ],
            [
                _exercise("Promise Chain",
                          "Create a series of promises that depend on each other's results.", "medium"),
                _exercise("Async Data Fetcher",
                          "Build an application that fetches and displays data from an API.", "medium"),
                _exercise("Error Handler",
                          "Implement proper error handling in asynchronous code.", "hard"),
            ],
            "3-4 weeks",
        ),
        _milestone(
            "Project: Interactive Web Application",
            "Apply your JavaScript knowledge by building a complete interactive web application.",
            ["Project Planning", "Application Architecture", "Debugging", "Performance Optimization"],
            [
                _resource("JavaScript Project Structure Best Practices",
                          "https://github.com/elsewhencode/project-guidelines",
                          "article", "Guidelines for structuring JavaScript projects."),
                _resource("Building a JavaScript Application From Scratch",
                          "https://www.udemy.com/course/javascript-web-projects/",
                          "course", "Step-by-step guide to building complete web applications."),
                _resource("JavaScript Debugging Techniques", "https://www.youtube.com/watch?v=H0XScE08hy8",
                          "video", "Essential debugging strategies for JavaScript developers."),
            ],
            [
                _youtube("3PHXvlpOkf4", "Build 15 JavaScript Projects - Vanilla JavaScript Course",
                         "8:18:29", "freeCodeCamp.org"),
                _youtube("lGnG-yrWQvk", "How to Plan a JavaScript Project", "14:37", "Coding Garden"),
            ],
            [
                _exercise("Project Wireframing",
                          "Create a detailed plan and wireframe for your web application.", "easy"),
                _exercise("Basic Application Setup",
                          "Set up the project structure and implement core functionality.", "medium"),
                _exercise("Complete Interactive Application",
                          "Finish your application with all planned features and polish the user experience.",
                          "hard"),
            ],
            "4-6 weeks",
        ),
    ]


def javascript_advanced_milestones():
    return [
        _milestone(
            "Advanced JavaScript Concepts",
            "Deepen your understanding of JavaScript with advanced concepts like closures, prototypes, "
            "and the this keyword.",
            ["Closures", "Prototypes", "This Keyword", "Execution Context"],
            [
                _resource("Advanced JavaScript Concepts - MDN",
                          "https://developer.mozilla.org/en-US/docs/Web/JavaScript/Closures",
                          "documentation", "In-depth documentation on advanced JavaScript concepts."),
                _resource("JavaScript: Understanding the Weird Parts",
                          "https://www.udemy.com/course/understand-javascript/",
                          "course", "Detailed course on JavaScript's most complex features."),
                _resource("JavaScript: The Hard Parts",
                          "https://frontendmasters.com/courses/javascript-hard-parts/",
                          "video", "Deep dive into challenging JavaScript concepts."),
            ],
            [
                _youtube("R9I85RhI7Cg", "JavaScript: The Advanced Concepts (2023)", "30:22:07", "Zero To Mastery"),
                _youtube("8aGhZQkoFbQ", "JavaScript Under The Hood", "26:52", "JSConf"),
            ],
            [
                _exercise("Closure Implementations",
                          "Create practical examples demonstrating closures and their uses.", "medium"),
                _exercise("Prototype Chain Exploration",
                          "Build a complex inheritance system using prototypes.", "hard"),
                _exercise("Context Binding Challenges",
                          "Practice managing 'this' context in various scenarios.", "hard"),
            ],
            "3-4 weeks",
        ),
    ]


def python_beginner_milestones():
    return [
        _milestone(
            "Python Fundamentals",
            "Learn the core Python syntax, data types, and basic operations.",
            ["Variables", "Data Types", "Control Flow", "Functions", "Lists and Dictionaries"],
            [
                _resource("Python Official Tutorial", "https://docs.python.org/3/tutorial/",
                          "documentation", "The official Python tutorial covering all the basics."),
                _resource("Python for Everybody - Coursera", "https://www.coursera.org/specializations/python",
                          "course", "Popular beginner-friendly Python course series."),
                _resource("Python Crash Course For Beginners", "https://www.youtube.com/watch?v=JJmcL1N2KQs",
                          "video", "Comprehensive overview of Python fundamentals."),
            ],
            [
                _youtube("kqtD5dpn9C8", "Python for Beginners - Learn Python in 1 Hour",
                         "1:00:27", "Programming with Mosh"),
                _youtube("rfscVS0vtbw", "Learn Python - Full Course for Beginners", "4:26:51", "freeCodeCamp.org"),
            ],
            [
                _exercise("Python Calculator",
                          "Build a simple calculator using basic Python operations.", "easy"),
                _exercise("List Manipulation",
                          "Practice creating and manipulating lists with various methods.", "easy"),
                _exercise("Dictionary Data Storage",
                          "Create a program that stores and retrieves data using dictionaries.", "medium"),
            ],
            "2-3 weeks",
        ),
    ]


def generic_beginner_milestones(language):
    return [
        _milestone(
            f"{language} Fundamentals",
            f"Learn the basic syntax and concepts of {language}.",
            ["Core Syntax", "Basic Operations", "Control Structures", "Functions"],
            [
                _resource(f"{language} Official Documentation", "#",
                          "documentation", f"The official reference for {language} programming."),
                _resource(f"{language} Beginner Course", "#",
                          "course", f"Comprehensive introduction to {language}."),
                _resource(f"{language} Crash Course", "#",
                          "video", f"Quick introduction to {language} fundamentals."),
            ],
            [
                _video(f"{language} Programming Course for Beginners", "#", "1:30:00", "Learning Platform"),
                _video(f"{language} Tutorial: Basic Concepts", "#", "45:22", "Programming Mentor"),
            ],
            [
                _exercise("Syntax Practice", f"Write basic programs using {language} syntax.", "easy"),
                _exercise("Logic Implementation", f"Implement simple algorithms in {language}.", "medium"),
                _exercise("Function Workshop", "Create reusable functions to solve various problems.", "medium"),
            ],
            "2-3 weeks",
        ),
    ]


def advanced_topic_milestone(language, index):
    """Filler milestone used to pad short roadmaps; ``index`` is 1-based."""
    return _milestone(
        f"{language} Advanced Topic {index}",
        f"Explore advanced concepts and techniques in {language}.",
        ["Advanced Concept 1", "Advanced Concept 2", "Advanced Concept 3"],
        [
            _resource(f"{language} Advanced Documentation", "#",
                      "documentation", f"Detailed guide on advanced {language} features."),
            _resource(f"Advanced {language} Course", "#",
                      "course", f"In-depth course on {language} mastery."),
            _resource(f"{language} Deep Dive", "#",
                      "video", f"Detailed video series on advanced {language} topics."),
        ],
        [
            _video(f"Advanced {language} Techniques", "#", "1:15:00", "Expert Academy"),
            _video(f"{language} Performance Optimization", "#", "52:18", "Pro Coder Channel"),
        ],
        [
            _exercise("Advanced Challenge 1",
                      f"Apply advanced {language} concepts to solve a complex problem.", "medium"),
            _exercise("Advanced Project", f"Build a sophisticated application using {language}.", "hard"),
        ],
        "3-4 weeks",
    )
