"""Static blueprint of the generated Express + MongoDB API project.

The catalog is plain data: an ordered tuple of directories and an ordered
tuple of ``FileSpec`` entries whose content templates may reference only the
variables defined in :mod:`.context` (``{{ name }}`` and ``{{ name_lower }}``).
The module validates its own templates at import time.
"""

from __future__ import annotations

from dataclasses import dataclass

from .context import CONTEXT_VARIABLES
from .paths import resolve
from .templates import TemplateRenderer


@dataclass(frozen=True)
class FileSpec:
    """A file to generate: catalog-relative POSIX path and content template."""

    path: str
    template: str


# ---------------------------------------------------------------------------
# Directories
# ---------------------------------------------------------------------------

DIRECTORIES: tuple[str, ...] = (
    "src",
    "src/api/v1/controllers",
    "src/api/v1/models",
    "src/api/v1/routes",
    "src/middlewares",
    "src/utils",
    "src/config",
    "tests/unit/controllers",
    "tests/unit/services",
    "tests/integration/routes",
)


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------

ERROR_MIDDLEWARE_JS = """
import { AppError } from '../utils/AppError.js';
import { errorResponse } from '../utils/errorResponse.js';

const errorMiddleware = (err, req, res, next) => {
  let error = { ...err };
  error.message = err.message;

  console.error(err.stack);

  if (err.name === 'ValidationError') {
    const message = Object.values(err.errors).map((val) => val.message).join(', ');
    error = new AppError(message, 400);
  }

  if (err.code === 11000) {
    const message = 'Duplicate field value entered.';
    error = new AppError(message, 400);
  }

  if (err.name === 'JsonWebTokenError') {
    const message = 'Invalid token. Please log in again.';
    error = new AppError(message, 401);
  }

  if (err.name === 'TokenExpiredError') {
    const message = 'Token has expired. Please log in again.';
    error = new AppError(message, 401);
  }

  errorResponse(res, error.statusCode || 500, error.message || 'Server Error');
};

export default errorMiddleware;
"""

APP_ERROR_JS = """
class AppError extends Error {
  constructor(message, statusCode) {
    super(message);
    this.statusCode = statusCode;
    this.isOperational = true;

    Error.captureStackTrace(this, this.constructor);
  }
}

export { AppError };
"""

ERROR_RESPONSE_JS = """
const errorResponse = (res, statusCode, message) => {
  res.status(statusCode).json({
    success: false,
    error: message,
  });
};

export { errorResponse };
"""


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------

JWT_UTILS_JS = """
import jwt from 'jsonwebtoken';

export const generateToken = (id) => {
  return jwt.sign({ id }, process.env.JWT_SECRET, { expiresIn: '30d' });
};
"""

AUTH_MIDDLEWARE_JS = """
import jwt from 'jsonwebtoken';
import { User } from '../api/v1/models/userModel.js';
import { AppError } from '../utils/AppError.js';

export const protect = async (req, res, next) => {
  let token;

  if (
    req.headers.authorization &&
    req.headers.authorization.startsWith('Bearer')
  ) {
    try {
      // Get token from header
      token = req.headers.authorization.split(' ')[1];

      // Verify token
      const decoded = jwt.verify(token, process.env.JWT_SECRET);

      // Get user from the token
      req.user = await User.findById(decoded.id).select('-password');

      next();
    } catch (error) {
      return next(new AppError('Not authorized, token failed', 401));
    }
  }

  if (!token) {
    return next(new AppError('Not authorized, no token', 401));
  }
};
"""


# ---------------------------------------------------------------------------
# Application bootstrap
# ---------------------------------------------------------------------------

APP_JS = """
import express from 'express';
import userRoutes from './api/v1/routes/userRoutes.js';
import errorMiddleware from './middlewares/errorMiddleware.js';
import dotenv from 'dotenv';

dotenv.config();

const app = express();

// Middleware for parsing JSON request body
app.use(express.json());

// Routes
app.use('/api/v1/users', userRoutes);

// Error handling middleware should be last
app.use(errorMiddleware);

export default app;
"""

SERVER_JS = """
import app from './app.js';
import { connectDB } from './config/db.js';

const PORT = process.env.PORT || 5000;

// Connect to Database
connectDB();

// Start Server
app.listen(PORT, () => console.log(`Server running on port ${PORT}`));
"""

DB_CONFIG_JS = """
import mongoose from 'mongoose';

const MONGO_URI = process.env.MONGO_URI || 'mongodb://localhost:27017/{{ name_lower }}';

export const connectDB = async () => {
  try {
    const conn = await mongoose.connect(MONGO_URI);
    console.log(`MongoDB Connected: ${conn.connection.host}`);
  } catch (error) {
    console.error(`Error: ${error.message}`);
    process.exit(1);
  }
};
"""


# ---------------------------------------------------------------------------
# Users API
# ---------------------------------------------------------------------------

USER_ROUTES_JS = """
import express from 'express';
import { registerUser, loginUser, getUserProfile } from '../controllers/userController.js';
import { protect } from '../../../middlewares/authMiddleware.js';

const router = express.Router();

router.post('/register', registerUser);
router.post('/login', loginUser);
router.get('/profile', protect, getUserProfile);

export default router;
"""

USER_CONTROLLER_JS = """
import { User } from '../models/userModel.js';
import { generateToken } from '../../../utils/jwtUtils.js';
import bcrypt from 'bcryptjs';
import { AppError } from '../../../utils/AppError.js';

// Register a new user
export const registerUser = async (req, res, next) => {
  try {
    const { name, email, password } = req.body;

    // Check if user already exists
    const existingUser = await User.findOne({ email });
    if (existingUser) {
      return next(new AppError('User already exists', 400));
    }

    // Create new user
    const newUser = await User.create({ name, email, password });

    res.status(201).json({
      success: true,
      data: {
        _id: newUser._id,
        name: newUser.name,
        email: newUser.email,
        token: generateToken(newUser._id),
      },
    });
  } catch (err) {
    next(err);
  }
};

// Authenticate user and get token
export const loginUser = async (req, res, next) => {
  try {
    const { email, password } = req.body;

    // Check for user
    const user = await User.findOne({ email });
    if (!user) {
      return next(new AppError('Invalid email or password', 401));
    }

    // Check password
    const isMatch = await bcrypt.compare(password, user.password);
    if (!isMatch) {
      return next(new AppError('Invalid email or password', 401));
    }

    res.json({
      success: true,
      data: {
        _id: user._id,
        name: user.name,
        email: user.email,
        token: generateToken(user._id),
      },
    });
  } catch (err) {
    next(err);
  }
};

// Get user profile (protected)
export const getUserProfile = async (req, res, next) => {
  try {
    const user = await User.findById(req.user._id).select('-password');
    if (user) {
      res.json({
        success: true,
        data: user,
      });
    } else {
      return next(new AppError('User not found', 404));
    }
  } catch (err) {
    next(err);
  }
};
"""

USER_MODEL_JS = """
import mongoose from 'mongoose';
import bcrypt from 'bcryptjs';

const userSchema = new mongoose.Schema({
  name: { type: String, required: true },
  email: { type: String, required: true, unique: true },
  password: { type: String, required: true },
}, { timestamps: true });

// Hash password before saving
userSchema.pre('save', async function (next) {
  if (!this.isModified('password')) return next();
  this.password = await bcrypt.hash(this.password, 12);
  next();
});

export const User = mongoose.model('User', userSchema);
"""


# ---------------------------------------------------------------------------
# Project files
# ---------------------------------------------------------------------------

PACKAGE_JSON = """
{
  "name": "{{ name }}",
  "version": "1.0.0",
  "description": "A Node.js and Express.js RESTful API project with JWT authentication and error handling.",
  "main": "src/server.js",
  "scripts": {
    "start": "node src/server.js",
    "dev": "nodemon src/server.js"
  },
  "dependencies": {
    "bcryptjs": "^2.4.3",
    "dotenv": "^16.3.1",
    "express": "^4.17.1",
    "jsonwebtoken": "^9.0.2",
    "mongoose": "^8.8.3"
  },
  "devDependencies": {
    "nodemon": "^2.0.22"
  },
  "type": "module",
  "author": "Your Name",
  "license": "MIT"
}
"""

DOTENV = """
PORT=5000
MONGO_URI=mongodb://localhost:27017/{{ name_lower }}
JWT_SECRET=yourjwtsecretkey
"""

GITIGNORE = """
node_modules/
.env
"""

README_MD = """
# {{ name }}

A Node.js and Express.js RESTful API project with JWT authentication and centralized error handling.

## Features

- **User Authentication**: Register, login, and profile endpoints with JWT.
- **Error Handling**: Centralized error handling middleware.
- **Database**: MongoDB with Mongoose.
- **Environment Variables**: Managed via `.env` file.

## Getting Started

### Prerequisites

- **Node.js** (v14 or higher)
- **npm** (v6 or higher)
- **MongoDB** installed and running

### Installation

1. Navigate to the project directory:
   ```bash
   cd {{ name }}
   ```

2. Install dependencies:
   ```bash
   npm install
   ```

3. Set up environment variables:
   - Edit the `.env` file with your configuration.

### Running the Project

- **Development Mode** (with nodemon):
  ```bash
  npm run dev
  ```

- **Production Mode**:
  ```bash
  npm start
  ```

### API Endpoints

#### User Endpoints

| Endpoint                 | Method | Description                     |
|--------------------------|--------|---------------------------------|
| `/api/v1/users/register` | POST   | Register a new user             |
| `/api/v1/users/login`    | POST   | Login and retrieve JWT          |
| `/api/v1/users/profile`  | GET    | Get user profile (protected)    |

### Usage

After generating the project structure, follow these steps:

1. Navigate to your project folder:
   ```bash
   cd {{ name }}
   ```

2. Install dependencies:
   ```bash
   npm install
   ```

3. Run the development server:
   ```bash
   npm run dev
   ```

4. Access the API endpoints using tools like [Postman](https://www.postman.com/) or [cURL](https://curl.se/).

## License

This project is licensed under the MIT License.
"""


FILES: tuple[FileSpec, ...] = (
    FileSpec("src/middlewares/errorMiddleware.js", ERROR_MIDDLEWARE_JS),
    FileSpec("src/utils/AppError.js", APP_ERROR_JS),
    FileSpec("src/utils/errorResponse.js", ERROR_RESPONSE_JS),
    FileSpec("src/utils/jwtUtils.js", JWT_UTILS_JS),
    FileSpec("src/middlewares/authMiddleware.js", AUTH_MIDDLEWARE_JS),
    FileSpec("src/app.js", APP_JS),
    FileSpec("src/server.js", SERVER_JS),
    FileSpec("src/api/v1/routes/userRoutes.js", USER_ROUTES_JS),
    FileSpec("src/api/v1/controllers/userController.js", USER_CONTROLLER_JS),
    FileSpec("src/api/v1/models/userModel.js", USER_MODEL_JS),
    FileSpec("src/config/db.js", DB_CONFIG_JS),
    FileSpec("package.json", PACKAGE_JSON),
    FileSpec(".env", DOTENV),
    FileSpec(".gitignore", GITIGNORE),
    FileSpec("README.md", README_MD),
)


# ---------------------------------------------------------------------------
# TemplateCatalog
# ---------------------------------------------------------------------------


class TemplateCatalog:
    """An immutable blueprint of directories and file templates.

    Construction validates the blueprint: every path must stay inside the
    project root, file paths must be unique, and templates may only reference
    the variables in ``CONTEXT_VARIABLES``.  A bad catalog therefore fails
    when it is built rather than halfway through a generation run.
    """

    def __init__(
        self,
        directories: tuple[str, ...] | list[str],
        files: tuple[FileSpec, ...] | list[FileSpec],
    ) -> None:
        self._directories = tuple(directories)
        self._files = tuple(files)
        self._validate()

    def list_directories(self) -> tuple[str, ...]:
        return self._directories

    def list_files(self) -> tuple[FileSpec, ...]:
        return self._files

    def _validate(self) -> None:
        renderer = TemplateRenderer()
        for directory in self._directories:
            resolve(".", directory)

        seen: set[str] = set()
        for spec in self._files:
            resolve(".", spec.path)
            if spec.path in seen:
                raise ValueError(f"Duplicate file path in catalog: {spec.path}")
            seen.add(spec.path)
            renderer.check(spec.template, CONTEXT_VARIABLES, spec.path)

    def __len__(self) -> int:
        return len(self._directories) + len(self._files)


DEFAULT_CATALOG = TemplateCatalog(DIRECTORIES, FILES)
